#!/usr/bin/python
# -*- coding: utf-8 -*-
'''
property.txt is the descriptor stored in every .genome archive.
Plain UTF-8 text, one key=value pair per line:

    ordered=true                 always the first line
    id=<genome id>
    name=<display name>
    cytobandFile=<file name>     cytoband table inside the archive
    geneFile=<file name>         gene model file inside the archive
    chrAliasFile=<file name>     chromosome alias table inside the archive
    sequenceLocation=<path|url>  where the sequence data lives

Every key except 'ordered' is optional.
'''

import os
import zipfile
from genomepack.core.errors import ArchiveIOError

PROPERTY_FILE_NAME = 'property.txt'

ORDERED_KEY = 'ordered'
ID_KEY = 'id'
NAME_KEY = 'name'
CYTOBAND_FILE_KEY = 'cytobandFile'
GENE_FILE_KEY = 'geneFile'
CHR_ALIAS_FILE_KEY = 'chrAliasFile'
SEQUENCE_LOCATION_KEY = 'sequenceLocation'

URL_PREFIXES = ('http://', 'https://', 'ftp://')

def is_url(location):
    return str(location).strip().lower().startswith(URL_PREFIXES)

def normalize_sequence_location(location):
    """URLs are kept as-is, local paths get forward slashes."""
    location = str(location)
    if is_url(location):
        return location

    return location.replace('\\', '/')

def file_name(path):
    """Base name of an optional file, None stays None."""
    if path is None:
        return None

    return os.path.basename(str(path))

def build_property_record(genome_id, display_name, cytoband_file=None, gene_file=None, alias_file=None, sequence_location=None):
    """Returns the ordered (key, value) pairs describing an archive.
    A key is only present when its value is not None."""
    record = [(ORDERED_KEY, 'true')]
    if genome_id is not None:
        record.append((ID_KEY, genome_id))

    if display_name is not None:
        record.append((NAME_KEY, display_name))

    if cytoband_file is not None:
        record.append((CYTOBAND_FILE_KEY, file_name(cytoband_file)))

    if gene_file is not None:
        record.append((GENE_FILE_KEY, file_name(gene_file)))

    if alias_file is not None:
        record.append((CHR_ALIAS_FILE_KEY, file_name(alias_file)))

    if sequence_location is not None:
        record.append((SEQUENCE_LOCATION_KEY, normalize_sequence_location(sequence_location)))

    return record

def write_property_file(record, path):
    with open(path, 'w', encoding='utf-8', newline='\n') as property_file:
        property_file.write('{}=true\n'.format(ORDERED_KEY))  # For backward compatibility
        for key, value in record:
            if key == ORDERED_KEY:
                continue

            property_file.write('{}={}\n'.format(key, value))

    return path

def parse_property_lines(lines):
    pairs = []
    for line in lines:
        line = line.rstrip('\r\n')
        if not line.strip() or line.lstrip().startswith('#'):
            continue

        key, _, value = line.partition('=')
        pairs.append((key.strip(), value))

    return pairs

def read_property_file(path):
    with open(path, 'r', encoding='utf-8') as property_file:
        return parse_property_lines(property_file)

def read_archive_properties(archive_path):
    """Reads the property.txt member of a .genome archive."""
    try:
        with zipfile.ZipFile(archive_path, 'r') as archive:
            text = archive.read(PROPERTY_FILE_NAME).decode('utf-8')
    except KeyError as e:
        raise ArchiveIOError('{} has no {} entry'.format(archive_path, PROPERTY_FILE_NAME)) from e
    except (zipfile.BadZipFile, OSError) as e:
        raise ArchiveIOError('Failed to read genome archive {}: {}'.format(archive_path, e)) from e

    return parse_property_lines(text.splitlines())


class ArchiveInspector:
    def __init__(self, args):
        """Prints the members and properties of a genome archive."""
        self.input = args['ARCHIVE']
        self.members = []
        self.properties = []

    def run(self):
        self.properties = read_archive_properties(self.input)
        with zipfile.ZipFile(self.input, 'r') as archive:
            self.members = [(info.filename, info.file_size) for info in archive.infolist()]

        print(self.display_options())
        print(self.display_summary())
        return 0

    def display_options(self):
        """Returns a string describing all input args"""
        options_string = "\n/| genomepack inspect |\\\n¯¯¯¯¯¯¯¯¯¯¯¯¯¯¯¯¯¯¯¯¯¯¯¯\n"
        options_string += "  Input archive: {}\n".format(self.input)
        return options_string

    def display_summary(self):
        summary_string = '  *** Members ***\n'
        for name, size in self.members:
            summary_string += '  {:<30} {:>12} bytes\n'.format(name, size)

        summary_string += '  *** {} ***\n'.format(PROPERTY_FILE_NAME)
        for key, value in self.properties:
            summary_string += '  {}={}\n'.format(key, value)

        return summary_string
