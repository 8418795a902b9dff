#!/usr/bin/python
# -*- coding: utf-8 -*-

import argparse
from argparse import RawTextHelpFormatter
from genomepack import __version__, __updated__

class Helper:
    def __init__(self, args):
        self.no_args_message = """
/| genomepack |\\
¯¯¯¯¯¯¯¯¯¯¯¯¯¯¯¯
Packages a reference genome into a .genome archive.
usage: genomepack [subcommand] [options] [input file(s)]
Subcommands (use -h/--help for more info):

    create       (Build a .genome archive from a FASTA and annotation files)
    inspect      (List the members and properties of a .genome archive)

    --sequence index operations--
    index-fasta  (Write a .fai index next to a FASTA file)
    cytoband     (Write a one-band-per-sequence cytoband table)

"""

    def run(self):
        print(self.no_args_message)
        return 0


desc = 'Tools for packaging reference genomes as .genome archives.'
main_parser = argparse.ArgumentParser(description=desc, formatter_class=RawTextHelpFormatter)
main_parser.set_defaults(object='Helper')
main_parser.add_argument('-v', '--version', action='version', version='v{} ({})'.format(__version__, __updated__))
main_parser.add_argument('-l', '--loglevel',dest='log_level', help='Set log level', default='INFO', choices=['DEBUG','INFO','WARNING','ERROR'])
subparsers = main_parser.add_subparsers(title='subcommands',description='Choose a command to run',help='Supported subcommands:')

ARCHIVEdesc = """
Creates a .genome archive: a zip file holding property.txt and,
when supplied, a gene file, a cytoband file and a chromosome alias file.
If --fasta is given without --cytoband, a cytoband table with one band
per sequence (name, 0, length) is generated from the FASTA index.

property.txt keys:
    ordered           always 'true'
    id                genome id (--id)
    name              genome display name (--name)
    cytobandFile      name of the cytoband file in the archive
    geneFile          name of the gene file in the archive
    chrAliasFile      name of the alias file in the archive
    sequenceLocation  --sequence_override if given, else --sequence_location
"""


### genome_archive.py ###
create_parser = subparsers.add_parser('create',help="Builds a .genome archive from a FASTA file and optional annotation files.", description=ARCHIVEdesc, formatter_class=RawTextHelpFormatter)
create_parser.add_argument("-o", "--output_dir", dest='OUTPUT_DIR', type=str, default='.', help="Directory to write the archive to (default: current directory).")
create_parser.add_argument("-n", "--file_name", dest='FILE_NAME', type=str, required=True, help="File name of the archive (e.g. hg19.genome).")
create_parser.add_argument("--id", dest='GENOME_ID', type=str, required=True, help="Genome id.")
create_parser.add_argument("--name", dest='GENOME_NAME', type=str, required=True, help="User-friendly genome name.")
create_parser.add_argument("--sequence_location", dest='SEQUENCE_LOCATION', type=str, default=None, help="Path or URL of the sequence data, recorded in property.txt.")
create_parser.add_argument("--sequence_override", dest='SEQUENCE_OVERRIDE', type=str, default=None, help="Record this location instead of --sequence_location.")
create_parser.add_argument("--fasta", dest='FASTA', type=str, default=None, help="Genome FASTA file (uncompressed). Indexed if no .fai exists.")
create_parser.add_argument("--genes", dest='GENES', type=str, default=None, help="Gene model file (e.g. refFlat).")
create_parser.add_argument("--cytoband", dest='CYTOBAND', type=str, default=None, help="Cytoband file. Generated from the FASTA index if omitted.")
create_parser.add_argument("--alias", dest='ALIAS', type=str, default=None, help="Chromosome alias file.")
create_parser.add_argument("--cache_dir", dest='CACHE_DIR', type=str, default=None, help="Parent directory of the temporary working directory (default: system temp).")
create_parser.add_argument("-f" ,"--force", dest='FORCE', help="Force overwrite of the archive if it exists.", default=False, action='store_true')
create_parser.set_defaults(object='GenomeArchiver')

### genome_property.py ###
inspect_parser = subparsers.add_parser('inspect',help="Lists the members and property.txt of a .genome archive.")
inspect_parser.add_argument("ARCHIVE", type=str, help="Input .genome archive")
inspect_parser.set_defaults(object='ArchiveInspector')

### fasta_index.py ###
fasta_index_parser = subparsers.add_parser('index-fasta',help="Writes a samtools-style .fai index for a FASTA file.")
fasta_index_parser.add_argument("FASTA", type=str, help="Input FASTA file")
fasta_index_parser.set_defaults(object='Indexer')

### fasta_lengths.py ###
cytoband_parser = subparsers.add_parser('cytoband',help="Writes a cytoband table (name, 0, length) for each sequence of a FASTA file.")
cytoband_parser.add_argument("FASTA", type=str, help="Input FASTA file")
cytoband_parser.add_argument("-o", "--output", dest='OUT', help="Output file path (default: stdout)", default='stdout')
cytoband_parser.add_argument("-f" ,"--force", dest='FORCE', help="Force overwrite of --output file if it exists.", default=False, action='store_true')
cytoband_parser.set_defaults(object='CytobandWriter')
