import pytest

from chromascheme import (
    Color, decode, encode, Operation, OperationRequest, select_operation,
    MissingOperand, NoOperationSelected, ConflictingOperations, InvalidCount,
)
from chromascheme.operations import _HANDLERS, _SIGNATURES, ResultKind, ValueKind

RED = decode("#ff0000")
BLUE = decode("#0000ff")


def test_every_operation_is_wired():
    assert set(_HANDLERS) == set(Operation)
    assert set(_SIGNATURES) == set(Operation)

def test_operation_names_match_flags():
    assert Operation("Tetratic") is Operation.TETRADIC
    assert Operation("HueOffset") is Operation.HUE_OFFSET
    assert Operation.SPLIT_COMPLEMENTARY.value == "SplitComplementary"

def test_signatures():
    assert Operation.BLENDS.needs_second_color
    assert Operation.TETRADIC.needs_second_color
    assert not Operation.SHADES.needs_second_color
    assert Operation.DARKER.value_kind is ValueKind.AMOUNT
    assert Operation.HUE_OFFSET.value_kind is ValueKind.DEGREES
    assert Operation.TONES.value_kind is ValueKind.COUNT
    assert Operation.WARM.result_kind is ResultKind.FLAG
    assert Operation.CONTRAST.result_kind is ResultKind.COLOR

def test_select_operation():
    assert select_operation({Operation.SHADES: 4}) == (Operation.SHADES, 4)
    assert select_operation({Operation.TRIADIC: True}) == (Operation.TRIADIC, None)

def test_select_nothing():
    with pytest.raises(NoOperationSelected, match="No operation flag specified"):
        select_operation({})

def test_select_several():
    with pytest.raises(ConflictingOperations) as exc_info:
        select_operation({Operation.TRIADIC: True, Operation.SHADES: 3})
    assert set(exc_info.value.names) == {"Triadic", "Shades"}

def test_validate_missing_color1():
    with pytest.raises(MissingOperand, match="Color1 flag was not specified"):
        OperationRequest(Operation.TRIADIC, None).validate()

@pytest.mark.parametrize("operation, value", [(Operation.BLENDS, 3), (Operation.TETRADIC, None)])
def test_validate_missing_color2(operation, value):
    with pytest.raises(MissingOperand, match="Color2 flag is not specified"):
        OperationRequest(operation, RED, None, value).validate()

def test_validate_missing_value():
    with pytest.raises(MissingOperand, match="Shades needs a count value"):
        OperationRequest(Operation.SHADES, RED).validate()

def test_validate_returns_request():
    request = OperationRequest(Operation.COMPLEMENTARY, RED)
    assert request.validate() is request

@pytest.mark.parametrize("operation, color2, value, expected", [
    (Operation.DARKER, None, 0.5, "#800000"),
    (Operation.LIGHTER, None, 0.5, "#ff8080"),
    (Operation.COMPLEMENTARY, None, None, "#00ffff"),
    (Operation.CONTRAST, None, None, "#ffffff"),
    (Operation.HUE_OFFSET, None, 120, "#00ff00"),
])
def test_run_single_color(operation, color2, value, expected):
    result = OperationRequest(operation, RED, color2, value).run()
    assert isinstance(result, Color)
    assert encode(result) == expected

@pytest.mark.parametrize("operation, value, size", [
    (Operation.TRIADIC, None, 3),
    (Operation.QUADRATIC, None, 4),
    (Operation.ANALOGOUS, None, 3),
    (Operation.SPLIT_COMPLEMENTARY, None, 3),
    (Operation.TETRADIC, None, 4),
    (Operation.MONOCHROMATIC, 2, 3),
    (Operation.SHADES, 5, 6),
    (Operation.TINTS, 1, 2),
    (Operation.TONES, 3, 4),
    (Operation.BLENDS, 3, 5),
])
def test_run_sequence(operation, value, size):
    result = OperationRequest(operation, RED, BLUE, value).run()
    assert isinstance(result, list)
    assert len(result) == size
    assert result[0] == RED

def test_run_flags():
    assert OperationRequest(Operation.WARM, RED).run() is True
    assert OperationRequest(Operation.COOL, RED).run() is False
    assert OperationRequest(Operation.COOL, BLUE).run() is True

def test_run_propagates_count_errors():
    with pytest.raises(InvalidCount):
        OperationRequest(Operation.TINTS, RED, None, 0).run()

def test_request_is_frozen():
    request = OperationRequest(Operation.TRIADIC, RED)
    with pytest.raises(AttributeError):
        request.value = 3
