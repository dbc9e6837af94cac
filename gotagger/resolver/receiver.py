"""
Receiver Resolver

Decides whether a declaration is a bound method or a free function and,
for free functions, whether it belongs to a known type.

Decision procedure, in order:
    1. An explicit receiver clause makes the declaration a METHOD. Every
       receiver group contributes its rendered type (pointer marker kept)
       and its names.
    2. No results: a plain FUNCTION.
    3. The first result group declares several names, e.g. `(a, b T)`:
       a plain FUNCTION, since no single returned instance is identified.
    4. Otherwise the first result type is rendered without its outer pointer
       marker and looked up in the type registry. A hit makes the function a
       probable constructor: still a FUNCTION, but with that type as its
       inferred owner and no receiver names.

Limitations:
    The belongs-to heuristic has false negatives (a constructor declared
    before its type in single-pass order) and false positives (a function
    that merely returns a registered type). Tags are advisory, so both are
    accepted.
"""

from dataclasses import dataclass

import structlog

from gotagger.models import Declaration, TagKind
from gotagger.resolver.registry import TypeRegistry
from gotagger.signature import format_type

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Resolution:
    """
    Outcome of resolving one declaration.

    Attributes:
        kind: METHOD or FUNCTION
        receiver_types: Rendered receiver or inferred owner types
        receiver_names: Receiver name groups, aligned with receiver_types for
            methods and empty for inferred owners
    """

    kind: TagKind
    receiver_types: tuple[str, ...] = ()
    receiver_names: tuple[tuple[str, ...], ...] = ()

    @property
    def is_inferred(self) -> bool:
        """True if the owner came from the return-type heuristic."""
        return self.kind is TagKind.FUNCTION and len(self.receiver_types) > 0


_PLAIN_FUNCTION = Resolution(kind=TagKind.FUNCTION)


def resolve_receiver(decl: Declaration, registry: TypeRegistry) -> Resolution:
    """
    Classify a declaration and resolve its receiver information.

    Args:
        decl: The declaration to classify
        registry: Type names declared so far; only read, never updated

    Returns:
        The Resolution for the declaration
    """
    if decl.is_method:
        receiver_types = []
        receiver_names = []
        for group in decl.receiver:
            type_text = format_type(group.type)
            logger.debug(
                "receiver",
                function=decl.name,
                type=type_text,
                names=list(group.names),
            )
            receiver_types.append(type_text)
            receiver_names.append(tuple(group.names))
        return Resolution(
            kind=TagKind.METHOD,
            receiver_types=tuple(receiver_types),
            receiver_names=tuple(receiver_names),
        )

    if not decl.results:
        return _PLAIN_FUNCTION

    first = decl.results[0]
    if len(first.names) > 1:
        return _PLAIN_FUNCTION

    owner = format_type(first.type, dereference_pointers=True)
    if registry.contains(owner):
        logger.debug("inferred_owner", function=decl.name, owner=owner)
        return Resolution(kind=TagKind.FUNCTION, receiver_types=(owner,))

    return _PLAIN_FUNCTION
