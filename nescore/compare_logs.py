"""Compare two CPU trace logs line by line and report the first divergence."""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike
from typing import TextIO

_PREFIX = re.compile(r"(\S+) +(\S+) ")
_FIELD_PAIR = re.compile(r"(\S*) *(\S*)")


@dataclass(frozen=True)
class LogLine:
    """One parsed trace line, e.g.
    ``E12C  97950 STA $51 = $00   A:07 X:00 Y:00 S:F9 P:nv--dIzc V:75  H:252``.
    """

    line: str
    pc: str
    cycles: str
    asm: str
    mem_value: str | None
    registers: str
    v: str
    h: str


def _split_asm(full_asm: str) -> tuple[str, str | None]:
    equals = full_asm.find("=")
    if equals < 0:
        return full_asm, None
    if "," in full_asm or "JMP" in full_asm:
        # Indexed form: "STA $0000,Y [$0000] = $00"
        index = full_asm.rfind(" ", 0, equals)
        if index > 0:
            index = full_asm.rfind(" ", 0, index)
        if index < 0:
            raise ValueError(f"malformed instruction field: {full_asm!r}")
    else:
        # Simple form: "STA $51 = $00"
        index = equals - 1
        if index < 0:
            raise ValueError(f"malformed instruction field: {full_asm!r}")
    return full_asm[:index], full_asm[index + 1:]


def parse_line(line: str) -> LogLine:
    """Parse one trace line; raise ValueError if it does not have the trace layout."""
    text = line.rstrip("\r\n")
    prefix = _PREFIX.match(text)
    if prefix is None:
        raise ValueError(f"malformed log line: {text!r}")
    pc, cycles = prefix.group(1), prefix.group(2)
    asm_start = prefix.end()

    colon = text.find(":", asm_start - 1)
    if colon < 1:
        raise ValueError(f"no registers in log line: {text!r}")
    registers_start = colon - 1
    asm, mem_value = _split_asm(text[asm_start:registers_start])

    v_pos = text.find("V:", colon)
    if v_pos < 0:
        raise ValueError(f"no V field in log line: {text!r}")
    registers = text[registers_start:max(v_pos - 1, registers_start)]
    fields = _FIELD_PAIR.match(text, v_pos)
    v, h = fields.group(1), fields.group(2)

    return LogLine(
        line=line,
        pc=pc,
        cycles=cycles,
        asm=asm.strip(),
        mem_value=mem_value,
        registers=registers,
        v=v,
        h=h,
    )


def _quoted(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def lines_match(line1: LogLine, line2: LogLine) -> list[str] | None:
    """Return the differences between two parsed lines, or None if they match."""
    result: list[str] = []
    if line1.pc != line2.pc:
        result.append(f"Different PC: {line1.pc} vs {line2.pc}")
    if line1.cycles != line2.cycles:
        result.append(f"Different cycle: {_quoted(line1.cycles)} vs {_quoted(line2.cycles)}")
    if line1.asm != line2.asm:
        result.append(f"Different asm: {_quoted(line1.asm)} vs {_quoted(line2.asm)}")
    if line1.registers != line2.registers:
        result.append(f"Different registers: {line1.registers} vs {line2.registers}")
    if line1.v != line2.v:
        result.append(f"Different V: {_quoted(line1.v)} vs {_quoted(line2.v)}")
    if line1.h != line2.h:
        result.append(f"Different H: {_quoted(line1.h)} vs {_quoted(line2.h)}")
    return result or None


def _next_parsed(handle: TextIO) -> LogLine | None:
    raw = handle.readline()
    if not raw:
        return None
    return parse_line(raw)


def compare_log(
    file_name_1: str | PathLike[str], file_name_2: str | PathLike[str]
) -> list[str]:
    """Compare two trace files and describe where they first diverge.

    Returns an empty list when every line matches, otherwise the report:
    the line number, both raw lines and the list of differences, or the
    error that stopped the comparison.
    """
    with open(file_name_1, encoding="utf-8") as first, open(
        file_name_2, encoding="utf-8"
    ) as second:
        number = 1
        while True:
            try:
                line1 = _next_parsed(first)
            except ValueError as error:
                return [f"{number}: Error from file 1: {error}"]
            try:
                line2 = _next_parsed(second)
            except ValueError as error:
                return [f"{number}: Error from file 2: {error}"]

            if line1 is None and line2 is None:
                return []
            if line1 is None:
                return [f"{number}: Error from file 1: unexpected end of file"]
            if line2 is None:
                return [f"{number}: Error from file 2: unexpected end of file"]

            differences = lines_match(line1, line2)
            if differences:
                return [
                    f"Line {number} doesn't match",
                    line1.line.rstrip("\r\n"),
                    line2.line.rstrip("\r\n"),
                    *differences,
                ]
            number += 1