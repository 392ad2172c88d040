from enum import StrEnum


class OutputFormat(StrEnum):
    SHORT = "short"
    FULL = "full"
    JSON = "json"
    JSONL = "jsonl"
