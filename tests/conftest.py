"""Pytest configuration and fixtures."""

import sys
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

# Add src directory to path so tests use local code, not installed package
project_root = Path(__file__).parent.parent
src_dir = project_root / "src"
if str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))

HEADER = "#CHROM\tPOS\tID\tREF\tALT\tQUAL\tFILTER\tINFO\tFORMAT\t185423"

# Single-sample GATK-style record used across the test suite
GATK_LINE = (
    "1\t847491\trs28407778\tGTTTA\tG....\t745.77\tPASS\t"
    "AC=1;AF=0.500;AN=2;BaseQRankSum=0.842;ClippingRankSum=0.147;DB;DP=41;FS=0.000;"
    "MLEAC=1;MLEAF=0.500;MQ=60.00;MQ0=0;MQRankSum=-1.109;QD=18.19;ReadPosRankSum=0.334;"
    "VQSLOD=2.70;culprit=FS;set=variant\tGT:AD:DP:GQ:PL\t0/1:16,25:41:99:774,0,434"
)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_vcf() -> Path:
    """Small VCF mixing valid, multi-allelic, structural and invalid records."""
    test_data_dir = Path(__file__).parent / "testdata"
    return test_data_dir / "test.vcf"


@pytest.fixture
def single_sample_vcf() -> Path:
    test_data_dir = Path(__file__).parent / "testdata"
    return test_data_dir / "testsamples.vcf"


@pytest.fixture
def write_vcf(temp_dir: Path):
    """Write VCF text to a file in the temporary directory."""

    def _write(text: str, name: str = "input.vcf") -> Path:
        path = temp_dir / name
        path.write_text(text)
        return path

    return _write
