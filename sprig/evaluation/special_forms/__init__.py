"""Registry of special forms for the sprig evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before looking the head up in the
environment, so these names cannot be shadowed.
"""

from sprig.types.symbol import Symbol
from sprig.evaluation.special_forms.define_form import define_form
from sprig.evaluation.special_forms.func_form import func_form
from sprig.evaluation.special_forms.quote_form import quote_form
from sprig.evaluation.special_forms.if_form import if_form

IF = Symbol("if")

SPECIAL_FORMS = {
    Symbol("def"): define_form,
    Symbol("func"): func_form,
    Symbol("quote"): quote_form,
    # Skipped by the evaluator when the environment asks for the eager builtin.
    IF: if_form,
}
