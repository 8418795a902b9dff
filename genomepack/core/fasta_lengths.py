#!/usr/bin/python
# -*- coding: utf-8 -*-

import sys
import os
import logging
from genomepack.core.fasta_index import FastaIndex, build_index, index_path
from genomepack.core.errors import ValidationError
'''
Outputs a three-column tab-delimited "cytoband" table from a FASTA index:
    Sequence name    0    Length of the sequence

One band per sequence, in the order of the .fai file. Older genome readers
took chromosome order and lengths from a UCSC cytoband file, so an archive
without a real cytoband table carries this one instead.
'''

log = logging.getLogger(__name__)

def cytoband_lines(index):
    """Yields one '<name>\\t0\\t<length>' line per index entry."""
    for name, length in index:
        yield '{}\t0\t{}\n'.format(name, length)

def write_cytoband_file(fai_path, cytoband_path):
    """Writes the cytoband table for fai_path and returns the number of rows."""
    index = FastaIndex.load(fai_path)
    rows = 0
    with open(cytoband_path, 'w', encoding='utf-8', newline='\n') as cytoband_file:
        for line in cytoband_lines(index):
            cytoband_file.write(line)
            rows += 1

    log.debug('Wrote {} cytoband rows to {}'.format(rows, cytoband_path))
    return rows


class CytobandWriter:
    def __init__(self, args):
        """Writes a one-band-per-sequence cytoband table for a FASTA file."""
        self.fasta = args['FASTA']
        self.output = args['OUT']
        self.force = args['FORCE']
        self.index = index_path(self.fasta)
        self.index_exists = os.path.exists(self.index)
        self.rowcount = 0
        if self.output != 'stdout' and os.path.exists(self.output) and not self.force:
            raise ValidationError('Output file {} already exists. Use -f/--force to overwrite.'.format(self.output))

    def run(self):
        if self.output != 'stdout':
            print(self.display_options())

        if not self.index_exists:
            build_index(self.fasta, self.index)

        if self.output == 'stdout':
            for line in cytoband_lines(FastaIndex.load(self.index)):
                sys.stdout.write(line)
                self.rowcount += 1
        else:
            self.rowcount = write_cytoband_file(self.index, self.output)
            print(self.display_summary())

        return 0

    def display_options(self):
        """Returns a string describing all input args"""
        options_string = "\n/| genomepack cytoband |\\\n¯¯¯¯¯¯¯¯¯¯¯¯¯¯¯¯¯¯¯¯¯¯¯¯¯\n"
        options_string += "  Input file:    {}\n".format(self.fasta)
        options_string += "  Input index:   {}\n".format(self.index)
        options_string += "  Output file:   {}\n".format(self.output)
        return options_string

    def display_summary(self):
        summary_string = ''
        if not self.index_exists:
            summary_string += 'Index written to ({}).\n'.format(self.index)

        summary_string += 'Wrote {} cytoband rows.\n'.format(self.rowcount)
        return summary_string
