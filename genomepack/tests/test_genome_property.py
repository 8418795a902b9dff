import zipfile
import pytest

from genomepack.core.errors import ArchiveIOError
from genomepack.core.genome_property import (
    build_property_record, write_property_file, read_property_file,
    read_archive_properties, is_url, normalize_sequence_location,
)

def test_record_order_and_file_names():
    record = build_property_record(
        'hg19', 'Human (hg19)',
        cytoband_file='/tmp/work/hg19_cytoband.txt',
        gene_file='/data/refGene.txt',
        alias_file='/data/alias.tab',
        sequence_location='/data/hg19.fa',
    )
    assert record == [
        ('ordered', 'true'),
        ('id', 'hg19'),
        ('name', 'Human (hg19)'),
        ('cytobandFile', 'hg19_cytoband.txt'),
        ('geneFile', 'refGene.txt'),
        ('chrAliasFile', 'alias.tab'),
        ('sequenceLocation', '/data/hg19.fa'),
    ]

def test_missing_values_are_omitted():
    record = build_property_record('hg19', 'Human (hg19)')
    assert [k for k, v in record] == ['ordered', 'id', 'name']

def test_backslashes_normalized():
    record = build_property_record('g', 'G', sequence_location='C:\\data\\genome.fa')
    assert dict(record)['sequenceLocation'] == 'C:/data/genome.fa'

@pytest.mark.parametrize('location', [
    'http://example.org/genome.fa',
    'HTTPS://example.org/dir\\genome.fa',
    'ftp://ftp.example.org/pub/genome.fa',
])
def test_urls_recorded_unchanged(location):
    assert is_url(location)
    assert normalize_sequence_location(location) == location

def test_local_paths_are_not_urls():
    assert not is_url('/data/genome.fa')
    assert not is_url('C:\\data\\genome.fa')

def test_first_line_is_ordered(tmp_path):
    path = tmp_path / 'property.txt'
    write_property_file(build_property_record('g', 'G', gene_file='genes.txt'), str(path))
    lines = path.read_bytes().decode('utf-8').split('\n')
    assert lines[0] == 'ordered=true'
    assert lines[1:] == ['id=g', 'name=G', 'geneFile=genes.txt', '']

def test_written_without_record_sentinel(tmp_path):
    path = tmp_path / 'property.txt'
    write_property_file([('id', 'g')], str(path))
    assert path.read_text() == 'ordered=true\nid=g\n'

def test_read_back_matches_record(tmp_path):
    record = build_property_record('mm10', 'Mouse = mm10', alias_file='alias.txt', sequence_location='http://x.org/mm10.fa')
    path = tmp_path / 'property.txt'
    write_property_file(record, str(path))
    assert read_property_file(str(path)) == record

def test_read_archive_properties(tmp_path):
    archive = tmp_path / 'a.genome'
    with zipfile.ZipFile(str(archive), 'w') as zf:
        zf.writestr('property.txt', 'ordered=true\nid=a\nname=A\n')
    assert read_archive_properties(str(archive)) == [('ordered', 'true'), ('id', 'a'), ('name', 'A')]

def test_read_archive_without_properties(tmp_path):
    archive = tmp_path / 'a.genome'
    with zipfile.ZipFile(str(archive), 'w') as zf:
        zf.writestr('genes.txt', '')
    with pytest.raises(ArchiveIOError):
        read_archive_properties(str(archive))

def test_path_locations_accepted():
    from pathlib import PurePosixPath, PureWindowsPath
    assert not is_url(PurePosixPath('/data/genome.fa'))
    assert normalize_sequence_location(PurePosixPath('/data/genome.fa')) == '/data/genome.fa'
    assert normalize_sequence_location(PureWindowsPath('C:/data/genome.fa')) == 'C:/data/genome.fa'
