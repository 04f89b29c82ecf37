"""
GBAIRAI - Request Trace Context
trace_id lié à la requête en cours (contextvars)

Le client peut fournir son propre identifiant dans l'en-tête X-Trace-ID;
sinon un identifiant court est généré.
"""
import re
import uuid
from contextvars import ContextVar, Token
from typing import Optional, Tuple

TRACE_HEADER = "X-Trace-ID"
NO_TRACE = "no-trace"

_VALID_TRACE_ID = re.compile(r"^[A-Za-z0-9_-]{8,64}$")

_trace_id_var: ContextVar[str] = ContextVar("gbairai_trace_id", default=NO_TRACE)


def get_trace_id() -> str:
    return _trace_id_var.get()


def new_trace_id() -> str:
    return uuid.uuid4().hex[:12]


def bind_trace_id(incoming: Optional[str] = None) -> Tuple[str, Token]:
    """
    Lie un trace_id au contexte courant

    Returns:
        (trace_id, token) - le token sert à restaurer le contexte via reset_trace_id
    """
    if incoming and _VALID_TRACE_ID.match(incoming):
        trace_id = incoming
    else:
        trace_id = new_trace_id()
    return trace_id, _trace_id_var.set(trace_id)


def reset_trace_id(token: Token) -> None:
    _trace_id_var.reset(token)
