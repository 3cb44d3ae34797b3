"""
Signature synthesizer.

Builds the valid call signatures of an overload set. A signature is the
concatenation of one ``(<token>)`` group per parameter, where the token is
the argument category (``integer``, ``float``, ``string``, ``array``) or the
class name of a structured argument:

    getUser(id: int)                 -> "(integer)"
    getUser(id: int, name: string)   -> "(integer)(string)"
    listUsers()                      -> ""

Generated service methods compute the same string from the values they are
called with (see ``runtime.argument_signature``) and accept the call only when
it equals one of the entries.
"""

from __future__ import annotations

from .ir_nodes import OperationDescriptor, OverloadSet, SignatureSet


def variant_signature(variant: OperationDescriptor) -> str:
    """Signature of a single operation variant."""
    return "".join(f"({param.type.token})" for param in variant.parameters)


class SignatureSynthesizer:
    """Synthesizes the dispatch signatures of overload sets."""

    def synthesize(self, overload_set: OverloadSet) -> SignatureSet:
        """One entry per variant, in variant order. Duplicates are kept; the first match wins."""
        return SignatureSet(entries=tuple(variant_signature(variant) for variant in overload_set.variants))
