import json
import os
from typing import List, Optional


CHECK_SIZE = 8192

BOM_ENCODINGS = {
    b'\xef\xbb\xbf': 'utf-8-sig',
    # The utf-16 codec reads the byte order from the BOM and consumes it
    b'\xff\xfe': 'utf-16',
    b'\xfe\xff': 'utf-16',
}


def _ensure_file(filepath: str):
    if not os.path.exists(filepath):
        raise FileNotFoundError(f"File not found: {filepath}")
    if not os.path.isfile(filepath):
        raise ValueError(f"Not a file: {filepath}")


def is_binary_file(filepath: str) -> bool:
    _ensure_file(filepath)
    with open(filepath, 'rb') as f:
        chunk = f.read(CHECK_SIZE)
    if not chunk:
        return False
    if detect_bom(chunk):
        return False
    return b'\x00' in chunk


def detect_bom(data: bytes) -> Optional[str]:
    for bom, encoding in sorted(BOM_ENCODINGS.items(), key=lambda x: -len(x[0])):
        if data.startswith(bom):
            return encoding
    return None


def get_file_encoding(filepath: str) -> str:
    with open(filepath, 'rb') as f:
        raw = f.read(CHECK_SIZE)
    return detect_bom(raw) or 'utf-8'


def read_file_lines(filepath: str, encoding: Optional[str] = None) -> List[str]:
    _ensure_file(filepath)
    if is_binary_file(filepath):
        raise ValueError(f"Cannot read binary file: {filepath}")
    enc = encoding or get_file_encoding(filepath)
    with open(filepath, 'r', encoding=enc, errors='replace') as f:
        content = f.read()
    return content[:-1].split('\n') if content.endswith('\n') else (content.split('\n') if content else [])


def load_json_sequence(filepath: str, encoding: Optional[str] = None) -> list:
    _ensure_file(filepath)
    enc = encoding or get_file_encoding(filepath)
    with open(filepath, 'r', encoding=enc) as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {filepath}: {e}") from e
    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON array in {filepath}, got {type(data).__name__}")
    return data
