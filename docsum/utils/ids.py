"""Id generation for pipeline runs and chunks."""

import hashlib
import uuid


def generate_uuid_prefix(prefix: str) -> str:
    """Generate a unique id with prefix, e.g. run_<uuid>."""
    return f"{prefix}_{uuid.uuid4().hex[:24]}"


def generate_run_id() -> str:
    """Generate a unique run_id used to correlate log lines of one pipeline run."""
    return generate_uuid_prefix("run")


def generate_chunk_id(chunk_index: int, chunk_text: str) -> str:
    """Deterministic chunk_id from position and content. Same chunk -> same id."""
    digest = hashlib.sha256(f"{chunk_index}:{chunk_text}".encode("utf-8")).hexdigest()[:16]
    return f"chunk_{digest}"
