"""
Operation selection.

An ``OperationRequest`` is one ``Operation`` together with the colors and the
single numeric parameter it needs. Callers build exactly one request, validate
it and run it; ``select_operation`` turns "nothing chosen" and "several chosen"
into explicit errors.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Mapping, Optional, Tuple, Union

from . import scales, schemes, tonal
from .colors.color import Color
from .errors import ConflictingOperations, MissingOperand, NoOperationSelected

OperationResult = Union[Color, List[Color], bool]


class ValueKind(str, Enum):
    NONE = "none"
    AMOUNT = "amount"
    DEGREES = "degrees"
    COUNT = "count"


class ResultKind(str, Enum):
    COLOR = "color"
    SEQUENCE = "sequence"
    FLAG = "flag"


class Operation(str, Enum):
    DARKER = "Darker"
    LIGHTER = "Lighter"
    COMPLEMENTARY = "Complementary"
    CONTRAST = "Contrast"
    HUE_OFFSET = "HueOffset"
    TRIADIC = "Triadic"
    QUADRATIC = "Quadratic"
    TETRADIC = "Tetratic"
    ANALOGOUS = "Analogous"
    SPLIT_COMPLEMENTARY = "SplitComplementary"
    WARM = "Warm"
    COOL = "Cool"
    MONOCHROMATIC = "Monochromatic"
    SHADES = "Shades"
    TINTS = "Tints"
    TONES = "Tones"
    BLENDS = "Blends"

    @property
    def value_kind(self) -> ValueKind:
        return _SIGNATURES[self][0]

    @property
    def needs_second_color(self) -> bool:
        return _SIGNATURES[self][1]

    @property
    def result_kind(self) -> ResultKind:
        return _SIGNATURES[self][2]


# operation -> (parameter, second color required, result)
_SIGNATURES: Dict[Operation, Tuple[ValueKind, bool, ResultKind]] = {
    Operation.DARKER: (ValueKind.AMOUNT, False, ResultKind.COLOR),
    Operation.LIGHTER: (ValueKind.AMOUNT, False, ResultKind.COLOR),
    Operation.COMPLEMENTARY: (ValueKind.NONE, False, ResultKind.COLOR),
    Operation.CONTRAST: (ValueKind.NONE, False, ResultKind.COLOR),
    Operation.HUE_OFFSET: (ValueKind.DEGREES, False, ResultKind.COLOR),
    Operation.TRIADIC: (ValueKind.NONE, False, ResultKind.SEQUENCE),
    Operation.QUADRATIC: (ValueKind.NONE, False, ResultKind.SEQUENCE),
    Operation.TETRADIC: (ValueKind.NONE, True, ResultKind.SEQUENCE),
    Operation.ANALOGOUS: (ValueKind.NONE, False, ResultKind.SEQUENCE),
    Operation.SPLIT_COMPLEMENTARY: (ValueKind.NONE, False, ResultKind.SEQUENCE),
    Operation.WARM: (ValueKind.NONE, False, ResultKind.FLAG),
    Operation.COOL: (ValueKind.NONE, False, ResultKind.FLAG),
    Operation.MONOCHROMATIC: (ValueKind.COUNT, False, ResultKind.SEQUENCE),
    Operation.SHADES: (ValueKind.COUNT, False, ResultKind.SEQUENCE),
    Operation.TINTS: (ValueKind.COUNT, False, ResultKind.SEQUENCE),
    Operation.TONES: (ValueKind.COUNT, False, ResultKind.SEQUENCE),
    Operation.BLENDS: (ValueKind.COUNT, True, ResultKind.SEQUENCE),
}

_HANDLERS: Dict[Operation, Callable[..., OperationResult]] = {
    Operation.DARKER: lambda c1, c2, v: tonal.darker(c1, v),
    Operation.LIGHTER: lambda c1, c2, v: tonal.lighter(c1, v),
    Operation.COMPLEMENTARY: lambda c1, c2, v: tonal.complementary(c1),
    Operation.CONTRAST: lambda c1, c2, v: tonal.contrast(c1),
    Operation.HUE_OFFSET: lambda c1, c2, v: tonal.hue_offset(c1, v),
    Operation.TRIADIC: lambda c1, c2, v: schemes.triadic(c1),
    Operation.QUADRATIC: lambda c1, c2, v: schemes.quadratic(c1),
    Operation.TETRADIC: lambda c1, c2, v: schemes.tetradic(c1, c2),
    Operation.ANALOGOUS: lambda c1, c2, v: schemes.analogous(c1),
    Operation.SPLIT_COMPLEMENTARY: lambda c1, c2, v: schemes.split_complementary(c1),
    Operation.WARM: lambda c1, c2, v: tonal.is_warm(c1),
    Operation.COOL: lambda c1, c2, v: tonal.is_cool(c1),
    Operation.MONOCHROMATIC: lambda c1, c2, v: scales.monochromatic(c1, v),
    Operation.SHADES: lambda c1, c2, v: scales.shades(c1, v),
    Operation.TINTS: lambda c1, c2, v: scales.tints(c1, v),
    Operation.TONES: lambda c1, c2, v: scales.tones(c1, v),
    Operation.BLENDS: lambda c1, c2, v: scales.blends(c1, c2, v),
}


@dataclass(frozen=True)
class OperationRequest:
    operation: Operation
    color1: Optional[Color]
    color2: Optional[Color] = None
    value: Optional[Union[int, float]] = None

    def validate(self) -> "OperationRequest":
        """Raise ``MissingOperand`` if a color or parameter the operation needs is absent."""
        if self.color1 is None:
            raise MissingOperand("Color1 flag was not specified. Aborting.")
        if self.operation.needs_second_color and self.color2 is None:
            raise MissingOperand("Color2 flag is not specified. Aborting.")
        if self.operation.value_kind is not ValueKind.NONE and self.value is None:
            raise MissingOperand(
                f"{self.operation.value} needs a {self.operation.value_kind.value} value. Aborting."
            )
        return self

    def run(self) -> OperationResult:
        self.validate()
        return _HANDLERS[self.operation](self.color1, self.color2, self.value)


def select_operation(
    chosen: Mapping[Operation, Optional[Union[int, float, bool]]],
) -> Tuple[Operation, Optional[Union[int, float]]]:
    """
    Pick the single operation the caller asked for.

    Args:
        chosen: Every operation the caller set, mapped to its parameter
            (``True`` or ``None`` for switches).

    Returns:
        (operation, parameter) where parameter is ``None`` for switches.

    Raises:
        NoOperationSelected: ``chosen`` is empty.
        ConflictingOperations: more than one operation was set.
    """
    if not chosen:
        raise NoOperationSelected()
    if len(chosen) > 1:
        raise ConflictingOperations(op.value for op in chosen)

    (operation, value), = chosen.items()
    if operation.value_kind is ValueKind.NONE:
        value = None
    return operation, value
