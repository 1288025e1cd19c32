"""Test fixtures for statcodec.

Sample inputs, one per format, under ``samples/``:
- rust.json, rust_more.json: Rust statistics (mergeable)
- python.yaml: Python statistics
- go.toml: Go statistics
- c.cbor.hex: hex-encoded CBOR for {"C": {"code": 5}}
- not_stats.txt: text no codec accepts as statistics
"""

from pathlib import Path

FIXTURES_DIR = Path(__file__).parent

SAMPLES_DIR = FIXTURES_DIR / "samples"


def get_sample(name: str) -> Path:
    """Get path to a sample input.

    Raises:
        ValueError: If the sample doesn't exist
    """
    path = SAMPLES_DIR / name
    if not path.exists():
        raise ValueError(f"Sample not found: {name}")
    return path
