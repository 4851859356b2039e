"""
Pytest fixtures for seqindex tests.

Provides the two-record FASTA and FASTQ examples from the samtools faidx
documentation, both in memory and written to temporary files.
"""
import pytest


FASTA_EXAMPLE = (
    b">one\n"
    b"ATGCATGCATGCATGCATGCATGCATGCAT\n"
    b"GCATGCATGCATGCATGCATGCATGCATGC\n"
    b"ATGCAT\n"
    b">two another chromosome\n"
    b"ATGCATGCATGCAT\n"
    b"GCATGCATGCATGC\n"
)

FASTQ_EXAMPLE = (
    b"@fastq1\n"
    b"ATGCATGCATGCATGCATGCATGCATGCAT\n"
    b"GCATGCATGCATGCATGCATGCATGCATGC\n"
    b"ATGCAT\n"
    b"+\n"
    b"FFFA@@FFFFFFFFFFHHB:::@BFFFFGG\n"
    b"HIHIIIIIIIIIIIIIIIIIIIIIIIFFFF\n"
    b"8011<<\n"
    b"@fastq2\n"
    b"ATGCATGCATGCAT\n"
    b"GCATGCATGCATGC\n"
    b"+\n"
    b"IIA94445EEII==\n"
    b"=>IIIIIIIIICCC"
)


@pytest.fixture
def fasta_bytes():
    return FASTA_EXAMPLE


@pytest.fixture
def fastq_bytes():
    return FASTQ_EXAMPLE


@pytest.fixture
def fasta_file(tmp_path):
    path = tmp_path / "example.fa"
    path.write_bytes(FASTA_EXAMPLE)
    return path


@pytest.fixture
def fastq_file(tmp_path):
    path = tmp_path / "example.fq"
    path.write_bytes(FASTQ_EXAMPLE)
    return path
