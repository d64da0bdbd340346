"""
Command-line front end.

Decodes the input colors, runs exactly one operation and prints the result as
one line of JSON: ``{"Color":"#rrggbb"}`` for a single color, a list of those
records for a sequence, and ``true``/``false`` for warm/cool.
"""
from __future__ import annotations
import argparse
import json
import logging
import sys
from typing import Dict, List, Optional, Sequence, Union

from . import __version__
from .colors.color import Color
from .conversions import decode, encode
from .errors import ChromaSchemeError, MissingOperand
from .log import Log
from .operations import (
    Operation, OperationRequest, OperationResult, ResultKind, ValueKind, select_operation,
)

LOG_TAG = "chromascheme"

_HELP = {
    Operation.DARKER: "Make input color darker by a specific percentage.",
    Operation.LIGHTER: "Make input color lighter by a specific percentage.",
    Operation.COMPLEMENTARY: "Get the complementary color of the input color.",
    Operation.CONTRAST: "Get the color with the highest contrast of the input color, either black or white.",
    Operation.HUE_OFFSET: "Change the angle of the input color without changing the lightness or saturation.",
    Operation.TRIADIC: "A color scheme comprised of three equally spaced colors around the color wheel based on the input color.",
    Operation.QUADRATIC: "A color scheme comprised of four equally spaced colors around the color wheel based on the input color.",
    Operation.TETRADIC: "A color scheme made up by two input colors and their complementary values.",
    Operation.ANALOGOUS: "A color scheme created by getting the two colors that sit next to the input color on the color wheel.",
    Operation.SPLIT_COMPLEMENTARY: "A color scheme created by getting the two colors that sit next to the complement of the input color on the color wheel.",
    Operation.WARM: "Determine if the input color is warm.",
    Operation.COOL: "Determine if the input color is cool.",
    Operation.MONOCHROMATIC: "Number of colors of the same hue, but with a different lightness based on the input color.",
    Operation.SHADES: "Number of colors, based on the input color, blended from the given color to black.",
    Operation.TINTS: "Number of colors, based on the input color, blended from the given color to white.",
    Operation.TONES: "Number of colors, based on the input color, blended from the given color to gray.",
    Operation.BLENDS: "Number of colors, based on the two input colors, interpolated together.",
}

_VALUE_TYPES = {
    ValueKind.AMOUNT: float,
    ValueKind.DEGREES: int,
    ValueKind.COUNT: int,
}

_COLOR_HELP = "Hex RGB value of the {}. Can start with and without #. Can be short or standard formats."


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chromascheme",
        description="Derive colors and palettes from one or two hex colors.",
        allow_abbrev=False,
    )
    parser.add_argument("-Color1", "--Color1", dest="color1", metavar="HEX",
                        help=_COLOR_HELP.format("color1"))
    parser.add_argument("-Color2", "--Color2", dest="color2", metavar="HEX",
                        help=_COLOR_HELP.format("color2"))

    ops = parser.add_argument_group("operations (choose exactly one)")
    for op in Operation:
        flags = (f"-{op.value}", f"--{op.value}")
        if op.value_kind is ValueKind.NONE:
            ops.add_argument(*flags, dest=op.name, action="store_true", help=_HELP[op])
        else:
            ops.add_argument(*flags, dest=op.name, type=_VALUE_TYPES[op.value_kind],
                             default=None, metavar=op.value_kind.value.upper(), help=_HELP[op])

    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def request_from_args(args: argparse.Namespace) -> OperationRequest:
    """Build the single ``OperationRequest`` the parsed arguments describe."""
    if args.color1 is None:
        raise MissingOperand("Color1 flag was not specified. Aborting.")
    color1 = decode(args.color1)

    chosen: Dict[Operation, Optional[Union[int, float, bool]]] = {}
    for op in Operation:
        value = getattr(args, op.name)
        if value is not None and value is not False:
            chosen[op] = value

    operation, value = select_operation(chosen)
    color2 = decode(args.color2) if args.color2 is not None else None

    return OperationRequest(operation, color1, color2, value).validate()


def _record(color: Color) -> Dict[str, str]:
    return {"Color": encode(color)}


def format_result(operation: Operation, result: OperationResult) -> str:
    """Serialise an operation result to the one-line JSON wire format."""
    payload: Union[bool, Dict[str, str], List[Dict[str, str]]]
    kind = operation.result_kind
    if kind is ResultKind.FLAG:
        payload = bool(result)
    elif kind is ResultKind.COLOR:
        payload = _record(result)
    else:
        payload = [_record(color) for color in result]
    return json.dumps(payload, separators=(",", ":"))


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logger = Log.get(LOG_TAG)
    logger.setLevel(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        request = request_from_args(args)
        logger.debug("Running %s on %s", request.operation.value,
                     ", ".join(encode(c) for c in (request.color1, request.color2) if c is not None))
        result = request.run()
    except ChromaSchemeError as exc:
        logger.error(str(exc))
        return 1

    print(format_result(request.operation, result))
    return 0


def run() -> None:
    Log.enable_color(sys.stderr.isatty())
    sys.exit(main())
