#!/usr/bin/python
# -*- coding: utf-8 -*-

import sys
import os
import logging
import pysam
from genomepack.core.errors import ArchiveIOError
if __name__ == '__main__':
    sys.path.append('../../genomepack')
    from argument_parsers import fasta_index_parser as parser

log = logging.getLogger(__name__)

FAI_EXTENSION = '.fai'

def index_path(fasta_path):
    """Sibling index location expected for a FASTA file."""
    return str(fasta_path) + FAI_EXTENSION

def build_index(fasta_path, fai_path=None):
    """Writes a samtools-style .fai for fasta_path and returns its path."""
    fasta_path = str(fasta_path)
    default_path = index_path(fasta_path)
    fai_path = default_path if fai_path is None else str(fai_path)
    log.info('Building sequence index {}'.format(fai_path))
    save = pysam.set_verbosity(0)
    try:
        if fai_path == default_path:
            pysam.faidx(fasta_path)
        else:
            pysam.faidx(fasta_path, '--fai-idx', fai_path)
    except (pysam.SamtoolsError, OSError) as e:
        raise ArchiveIOError('Failed to build sequence index for {}: {}'.format(fasta_path, e)) from e
    finally:
        pysam.set_verbosity(save)

    if not os.path.exists(fai_path):
        raise ArchiveIOError('Sequence index was not written to {}'.format(fai_path))

    return fai_path


class FastaIndex:
    def __init__(self, entries=None):
        """Ordered (name, length) pairs of a FASTA index.
        Names keep the order they have in the .fai file."""
        self.entries = list(entries) if entries is not None else []
        self.lengths = {}
        for name, length in self.entries:
            self.lengths.setdefault(name, length)

    @classmethod
    def load(cls, fai_path):
        """Reads the first two columns (name, length) of each .fai line."""
        entries = []
        with open(fai_path, 'r') as fai:
            for linenumber, line in enumerate(fai, 1):
                if not line.strip():
                    continue

                fields = line.rstrip('\r\n').split('\t')
                if len(fields) < 2:
                    raise ValueError('{} line {}: expected at least 2 columns'.format(fai_path, linenumber))

                try:
                    length = int(fields[1])
                except ValueError:
                    raise ValueError('{} line {}: invalid sequence length {!r}'.format(fai_path, linenumber, fields[1]))

                entries.append((fields[0], length))

        return cls(entries)

    def names(self):
        return [name for name, length in self.entries]

    def length(self, name):
        return self.lengths[name]

    def __iter__(self):
        return iter(self.entries)

    def __len__(self):
        return len(self.entries)


class Indexer:
    def __init__(self, args):
        """Generates a .fai index file for an input genome FASTA file."""
        self.fasta = args['FASTA']
        self.index = index_path(self.fasta)
        self.index_exists = os.path.exists(self.index)
        self.sequence_count = 0

    def run(self):
        print(self.display_options())
        if not self.index_exists:
            build_index(self.fasta, self.index)

        self.sequence_count = len(FastaIndex.load(self.index))
        print(self.display_summary())
        return 0

    def display_options(self):
        """Returns a string describing all input args"""
        options_string = "\n/| genomepack index-fasta |\\\n¯¯¯¯¯¯¯¯¯¯¯¯¯¯¯¯¯¯¯¯¯¯¯¯¯¯¯¯¯\n"
        options_string += "  Input file:          {}\n".format(self.fasta)
        options_string += "  Output index:        {}\n".format(self.index)
        return options_string

    def display_summary(self):
        summary_string = ''
        if self.index_exists:
            summary_string += 'Index file ({}) already exists.\n'.format(self.index)
        else:
            summary_string += 'Index written to ({}).\n'.format(self.index)

        summary_string += '{} sequences indexed.\n'.format(self.sequence_count)
        return summary_string

if __name__ == '__main__':
    args = vars(parser.parse_args())
    obj = Indexer(args)
    sys.exit(obj.run())
