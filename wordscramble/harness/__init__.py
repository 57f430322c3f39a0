from .core import run_session, result_row
from .io import write_csv, write_manifest

__all__ = ["run_session", "result_row", "write_csv", "write_manifest"]
