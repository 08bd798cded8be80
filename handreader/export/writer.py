"""
Serialization of parsed hands to JSON documents or JSONL files.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from pydantic import TypeAdapter

from handreader.parse.schemas import Hand

logger = logging.getLogger(__name__)

_HANDS_ADAPTER = TypeAdapter(List[Hand])


def hands_to_document(hands: Sequence[Hand]) -> List[Dict[str, Any]]:
    """JSON-ready representation of hands, in order."""
    return [hand.model_dump(mode="json") for hand in hands]


def write_hands(
    hands: Sequence[Hand],
    path: Union[str, Path],
    fmt: str = "json",
    indent: Optional[int] = None
) -> Path:
    """
    Write hands to a JSON array document or a JSONL file (one hand per line).

    Args:
        hands: Hands in source order
        path: Output file path; parent directories are created
        fmt: "json" or "jsonl"
        indent: Indentation for the JSON document (ignored for JSONL)

    Returns:
        The path written
    """
    if fmt not in ("json", "jsonl"):
        raise ValueError(f"Unsupported output format: {fmt}")

    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    with open(out_path, "w", encoding="utf-8") as f:
        if fmt == "jsonl":
            for hand in hands:
                f.write(hand.model_dump_json() + "\n")
        else:
            json.dump(hands_to_document(hands), f, ensure_ascii=False, indent=indent)

    logger.info(f"Wrote {len(hands)} hands to {out_path} ({fmt})")
    return out_path


def read_hands(path: Union[str, Path]) -> List[Hand]:
    """Load hands written by write_hands; ``.jsonl`` files are read line by line."""
    in_path = Path(path)

    if in_path.suffix.lower() == ".jsonl":
        hands = []
        with open(in_path, "r", encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if line:
                    hands.append(Hand.model_validate_json(line))
        return hands

    with open(in_path, "r", encoding="utf-8") as f:
        return _HANDS_ADAPTER.validate_python(json.load(f))
