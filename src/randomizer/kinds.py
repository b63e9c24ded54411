"""Generator kinds and the selector parser used at configuration boundaries."""

from __future__ import annotations

from enum import IntEnum

from randomizer.exceptions import UnknownGeneratorKindError


class GeneratorKind(IntEnum):
    """Closed set of selectable random-number generator strategies.

    Ordinals are stable and may be persisted.
    """

    PLATFORM_DEFAULT = 0
    REJECTION_SAMPLING = 1
    CRYPTOGRAPHICALLY_SECURE = 2

    @property
    def label(self) -> str:
        """External name of the kind (e.g. ``'RejectionSampling'``)."""
        return _LABELS[self]


_LABELS: dict[GeneratorKind, str] = {
    GeneratorKind.PLATFORM_DEFAULT: "PlatformDefault",
    GeneratorKind.REJECTION_SAMPLING: "RejectionSampling",
    GeneratorKind.CRYPTOGRAPHICALLY_SECURE: "CryptographicallySecure",
}

_BY_LABEL: dict[str, GeneratorKind] = {label: kind for kind, label in _LABELS.items()}
_ORDINALS: frozenset[int] = frozenset(int(kind) for kind in GeneratorKind)


def kind_labels() -> list[str]:
    """Return the external names of all kinds, in ordinal order."""
    return [kind.label for kind in GeneratorKind]


def parse_generator_kind(value: GeneratorKind | str | int) -> GeneratorKind:
    """Resolve *value* to a :class:`GeneratorKind`.

    Strings must match a label exactly (case-sensitive). Integers are
    treated as ordinals.

    Args:
        value: A kind, a label such as ``'PlatformDefault'``, or an ordinal.

    Returns:
        The matching GeneratorKind.

    Raises:
        UnknownGeneratorKindError: If *value* does not name a kind.
    """
    if isinstance(value, GeneratorKind):
        return value
    if isinstance(value, str) and value in _BY_LABEL:
        return _BY_LABEL[value]
    if isinstance(value, int) and not isinstance(value, bool) and value in _ORDINALS:
        return GeneratorKind(value)
    raise UnknownGeneratorKindError(value, kind_labels())
