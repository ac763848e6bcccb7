"""Registry of special forms for the mceval evaluator.

Maps keyword Symbols to handler functions that implement non-standard
evaluation rules. The evaluator consults this table before ordinary
function application, whatever the keyword happens to be bound to.
"""

from mceval.types.symbol import Symbol
from mceval.evaluation.special_forms.lambda_form import lambda_form
from mceval.evaluation.special_forms.let_forms import let_form, letrec_form
from mceval.evaluation.special_forms.if_form import if_form
from mceval.evaluation.special_forms.define_form import define_form

SPECIAL_FORMS = {
    Symbol("lambda"): lambda_form,
    Symbol("let"): let_form,
    Symbol("letrec"): letrec_form,
    Symbol("if"): if_form,
    Symbol("define"): define_form,
}
