from pathlib import Path
import pytest

from genomepack.core.genome_archive import ArchiveRequest

# Two-sequence genome used across tests:
#
#   chr1  500 bp
#   chr2  300 bp
#
FASTA_LINE = 60

def _fasta_text(sequences):
    lines = []
    for name, length in sequences:
        lines.append('>{}\n'.format(name))
        seq = 'ACGT' * (length // 4) + 'ACGT'[:length % 4]
        for i in range(0, length, FASTA_LINE):
            lines.append(seq[i:i + FASTA_LINE] + '\n')
    return ''.join(lines)

def _fai_text(sequences):
    rows = []
    offset = 0
    for name, length in sequences:
        offset += len('>{}\n'.format(name))
        rows.append('{}\t{}\t{}\t{}\t{}\n'.format(name, length, offset, FASTA_LINE, FASTA_LINE + 1))
        full_lines, rest = divmod(length, FASTA_LINE)
        offset += full_lines * (FASTA_LINE + 1) + (rest + 1 if rest else 0)
    return ''.join(rows)

@pytest.fixture
def sequences():
    return [('chr1', 500), ('chr2', 300)]

@pytest.fixture
def fasta(tmp_path, sequences) -> Path:
    """FASTA without an index."""
    path = tmp_path / 'data' / 'genome.fa'
    path.parent.mkdir()
    path.write_text(_fasta_text(sequences))
    return path

@pytest.fixture
def indexed_fasta(fasta, sequences) -> Path:
    """FASTA with a sibling .fai already in place."""
    Path(str(fasta) + '.fai').write_text(_fai_text(sequences))
    return fasta

@pytest.fixture
def cache_dir(tmp_path) -> Path:
    path = tmp_path / 'cache'
    path.mkdir()
    return path

@pytest.fixture
def output_dir(tmp_path) -> Path:
    path = tmp_path / 'out'
    path.mkdir()
    return path

@pytest.fixture
def make_request(output_dir, cache_dir):
    def _make(**kwargs):
        fields = dict(
            output_dir=str(output_dir),
            file_name='test.genome',
            genome_id='test',
            display_name='Test genome',
            cache_dir=str(cache_dir),
        )
        fields.update(kwargs)
        return ArchiveRequest(**fields)
    return _make
