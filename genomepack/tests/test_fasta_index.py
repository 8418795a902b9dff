import os
from pathlib import Path
import pytest

from genomepack.core.fasta_index import FastaIndex, Indexer, build_index, index_path

def test_index_path():
    assert index_path('/data/genome.fa') == '/data/genome.fa.fai'

def test_load_keeps_file_order(tmp_path):
    fai = tmp_path / 'x.fa.fai'
    fai.write_text('chrM\t16571\t6\t60\t61\nchr10\t200\t16859\t60\t61\n\nchr2\t300\t17070\t60\t61\n')
    index = FastaIndex.load(str(fai))
    assert index.names() == ['chrM', 'chr10', 'chr2']
    assert index.length('chr10') == 200
    assert list(index) == [('chrM', 16571), ('chr10', 200), ('chr2', 300)]
    assert len(index) == 3

def test_load_rejects_bad_length(tmp_path):
    fai = tmp_path / 'x.fa.fai'
    fai.write_text('chr1\tlots\t6\t60\t61\n')
    with pytest.raises(ValueError):
        FastaIndex.load(str(fai))

def test_unknown_name_raises():
    with pytest.raises(KeyError):
        FastaIndex([('chr1', 10)]).length('chr2')

def test_build_index(fasta, sequences):
    fai = build_index(str(fasta))
    assert fai == str(fasta) + '.fai'
    assert list(FastaIndex.load(fai)) == sequences

def test_indexer_writes_missing_index(fasta, capsys):
    indexer = Indexer({'FASTA': str(fasta)})
    assert indexer.run() == 0
    assert os.path.exists(str(fasta) + '.fai')
    assert '2 sequences indexed.' in capsys.readouterr().out

def test_indexer_keeps_existing_index(indexed_fasta, capsys):
    fai = str(indexed_fasta) + '.fai'
    before = Path(fai).read_text()
    Indexer({'FASTA': str(indexed_fasta)}).run()
    assert Path(fai).read_text() == before
    assert 'already exists' in capsys.readouterr().out
