from .core import generate_case, generate_batch
from .io import write_csv, write_puzzles, write_manifest

__all__ = ["generate_case", "generate_batch", "write_csv", "write_puzzles", "write_manifest"]
