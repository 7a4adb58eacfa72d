"""
Trace recording for AES round transforms.

A TraceRecorder passed to the round engine receives one record per
elementary step (AddRoundKey, SubBytes, ...). Records can be kept in
memory, streamed as JSON Lines, and/or printed as a compact verbose view.
"""

import json
from typing import Any, TextIO

from .utils import format_state_words


class TraceRecorder:
    """
    Records the state after each step of a block operation.

    Supports:
    - In-memory records (always)
    - JSON Lines file output (when trace_file is set)
    - Simple verbose stdout
    """

    def __init__(self, verbose: bool = False, trace_file: TextIO | None = None):
        self.verbose = verbose
        self.trace_file = trace_file
        self._records: list[dict[str, Any]] = []

    def record(self, **kwargs) -> None:
        """Record a trace entry."""
        self._records.append(kwargs)

        if self.trace_file:
            self._write_jsonl(kwargs)

        if self.verbose:
            self._print_verbose(kwargs)

    def _write_jsonl(self, record: dict[str, Any]) -> None:
        serializable = self._make_serializable(record)
        self.trace_file.write(json.dumps(serializable) + "\n")
        self.trace_file.flush()

    def _make_serializable(self, obj: Any) -> Any:
        if isinstance(obj, dict):
            return {k: self._make_serializable(v) for k, v in obj.items()}
        elif isinstance(obj, list):
            return [self._make_serializable(item) for item in obj]
        elif isinstance(obj, (bytes, bytearray)):
            return bytes(obj).hex()
        else:
            return obj

    def _print_verbose(self, record: dict[str, Any]) -> None:
        round_num = record.get("round", "?")
        operation = record.get("operation", "unknown")

        if "state" in record:
            print(f"R{round_num:<2} {operation:16s} STATE:{format_state_words(record['state'])}")

    def operations(self) -> list[str]:
        """Operation names in the order they were recorded."""
        return [r.get("operation", "") for r in self._records]

    def get_records(self) -> list[dict[str, Any]]:
        return list(self._records)

    def clear(self) -> None:
        self._records.clear()
