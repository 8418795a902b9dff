#!/usr/bin/python
# -*- coding: utf-8 -*-

import sys
import os
import shutil
import logging
import tempfile
import zipfile
from genomepack.core.errors import ValidationError, ArchiveIOError
from genomepack.core.fasta_index import build_index, index_path
from genomepack.core.fasta_lengths import write_cytoband_file
from genomepack.core.genome_property import PROPERTY_FILE_NAME, build_property_record, file_name, write_property_file
if __name__ == '__main__':
    sys.path.append('../../genomepack')
    from argument_parsers import create_parser as parser

log = logging.getLogger(__name__)

ZIP_EXTENSION = '.zip'
GZIP_EXTENSION = '.gz'
CYTOBAND_SUFFIX = '_cytoband.txt'
WORKDIR_SUFFIX = '_tmp'

class ArchiveRequest:
    def __init__(self, output_dir, file_name, genome_id, display_name,
                 sequence_location=None, sequence_file=None, gene_file=None,
                 cytoband_file=None, alias_file=None, sequence_location_override=None,
                 cache_dir=None, overwrite=True):
        """Everything needed to build one genome archive.
        Optional files are None when not supplied."""
        self.output_dir = output_dir
        self.file_name = file_name
        self.genome_id = genome_id
        self.display_name = display_name
        self.sequence_location = sequence_location
        self.sequence_file = sequence_file
        self.gene_file = gene_file
        self.cytoband_file = cytoband_file
        self.alias_file = alias_file
        self.sequence_location_override = sequence_location_override
        self.cache_dir = cache_dir
        self.overwrite = overwrite

    @classmethod
    def from_args(cls, args):
        return cls(
            output_dir=args['OUTPUT_DIR'],
            file_name=args['FILE_NAME'],
            genome_id=args['GENOME_ID'],
            display_name=args['GENOME_NAME'],
            sequence_location=args['SEQUENCE_LOCATION'],
            sequence_file=args['FASTA'],
            gene_file=args['GENES'],
            cytoband_file=args['CYTOBAND'],
            alias_file=args['ALIAS'],
            sequence_location_override=args['SEQUENCE_OVERRIDE'],
            cache_dir=args['CACHE_DIR'],
            overwrite=args['FORCE']
        )

    @property
    def archive_path(self):
        return os.path.join(str(self.output_dir), self.file_name)

    @property
    def working_directory(self):
        cache_dir = self.cache_dir if self.cache_dir is not None else tempfile.gettempdir()
        return os.path.join(str(cache_dir), self.file_name + WORKDIR_SUFFIX)

    def effective_sequence_location(self):
        """The override replaces the recorded location, never the sequence file itself."""
        if self.sequence_location_override:
            return self.sequence_location_override

        return self.sequence_location


def archive_member_names(request):
    """Names the gene, cytoband, property and alias slots will have in the archive."""
    cytoband_name = file_name(request.cytoband_file)
    if cytoband_name is None and request.sequence_file is not None:
        cytoband_name = str(request.genome_id) + CYTOBAND_SUFFIX

    return [file_name(request.gene_file), cytoband_name, PROPERTY_FILE_NAME, file_name(request.alias_file)]

def validate_request(request):
    """Raises ValidationError for a request that cannot be archived.
    Only looks at the request and the destination path."""
    required = [
        ('Genome output location', request.output_dir),
        ('Genome filename', request.file_name),
        ('Genome id', request.genome_id),
        ('Genome name', request.display_name)
    ]
    missing = [label for label, value in required if value is None or str(value) == '']
    if missing:
        log.error('Invalid input for genome creation: ')
        for label, value in required:
            log.error('\t{}={}'.format(label, value))

        raise ValidationError('Missing required genome fields: {}'.format(', '.join(missing)))

    if any(sep in str(request.genome_id) for sep in ('/', '\\')):
        raise ValidationError('Genome id {!r} must not contain a path separator.'.format(request.genome_id))

    single_line = [
        ('Genome id', request.genome_id),
        ('Genome name', request.display_name),
        ('Sequence location', request.effective_sequence_location())
    ]
    for label, value in single_line:
        if value is not None and ('\n' in str(value) or '\r' in str(value)):
            raise ValidationError('{} must not contain line breaks: {!r}'.format(label, value))

    member_names = [name for name in archive_member_names(request) if name is not None]
    duplicates = sorted(set(name for name in member_names if member_names.count(name) > 1))
    if duplicates:
        raise ValidationError('Archive members must have distinct file names, found duplicates: {}'.format(', '.join(duplicates)))

    if request.sequence_file is not None:
        sequence_name = os.path.basename(str(request.sequence_file)).lower()
        if sequence_name.endswith(ZIP_EXTENSION):
            raise ValidationError('Error.  Zip archives are not supported.  Please select a fasta file.')
        elif sequence_name.endswith(GZIP_EXTENSION):
            raise ValidationError('Error.  GZipped files are not supported.  Please select a non-gzipped fasta file.')

    if not request.overwrite and os.path.exists(request.archive_path):
        raise ValidationError('Output file {} already exists. Use -f/--force to overwrite.'.format(request.archive_path))

def prepare_working_directory(path):
    """Creates an empty directory at path, removing whatever was there."""
    try:
        if os.path.isdir(path):
            shutil.rmtree(path)
        elif os.path.exists(path):
            os.remove(path)

        os.makedirs(path)
    except OSError as e:
        raise ArchiveIOError('Failed to create working directory {}: {}'.format(path, e)) from e

def remove_quietly(path):
    """Best-effort removal used on the way out of create_genome_archive."""
    try:
        if os.path.isdir(path):
            shutil.rmtree(path)
        elif os.path.exists(path):
            os.remove(path)
    except OSError as e:
        log.warning('Failed to remove temporary file {}: {}'.format(path, e))

def write_archive(archive_path, members):
    """Zips each member under its base name, replacing any existing archive."""
    try:
        output_dir = os.path.dirname(archive_path)
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)

        with zipfile.ZipFile(archive_path, 'w', compression=zipfile.ZIP_DEFLATED) as archive:
            for member in members:
                archive.write(str(member), arcname=os.path.basename(str(member)))
    except (OSError, zipfile.BadZipFile, zipfile.LargeZipFile) as e:
        raise ArchiveIOError('Failed to write genome archive {}: {}'.format(archive_path, e)) from e

    return archive_path

def create_genome_archive(request):
    """Create a zip containing all the information and data required to load a
    genome, and return its path.

    The archive holds, when supplied, the gene file, the cytoband file,
    property.txt and the chromosome alias file. Without a cytoband file a
    one-band-per-sequence table is generated from the FASTA index so that the
    chromosome order and lengths travel with the archive.

    Temporary files live in request.working_directory, which is removed on
    every exit path. Two calls sharing the same working directory must not run
    at the same time.
    """
    validate_request(request)
    workdir = request.working_directory
    cytoband_file = request.cytoband_file
    generated_cytoband = None
    property_file = None
    try:
        prepare_working_directory(workdir)
        if request.sequence_file is not None:
            fai_path = index_path(request.sequence_file)
            if not os.path.exists(fai_path):
                build_index(request.sequence_file, fai_path)

            if cytoband_file is None:
                generated_cytoband = os.path.join(workdir, request.genome_id + CYTOBAND_SUFFIX)
                try:
                    write_cytoband_file(fai_path, generated_cytoband)
                except (OSError, ValueError) as e:
                    raise ArchiveIOError('Failed to generate cytoband file from {}: {}'.format(fai_path, e)) from e

                cytoband_file = generated_cytoband

        record = build_property_record(
            request.genome_id,
            request.display_name,
            cytoband_file=cytoband_file,
            gene_file=request.gene_file,
            alias_file=request.alias_file,
            sequence_location=request.effective_sequence_location()
        )
        property_file = os.path.join(workdir, PROPERTY_FILE_NAME)
        try:
            write_property_file(record, property_file)
        except OSError as e:
            raise ArchiveIOError('Failed to write {}: {}'.format(property_file, e)) from e

        members = [f for f in (request.gene_file, cytoband_file, property_file, request.alias_file) if f is not None]
        write_archive(request.archive_path, members)
        log.info('Genome archive written to {}'.format(request.archive_path))
    finally:
        if generated_cytoband is not None:
            remove_quietly(generated_cytoband)

        if property_file is not None:
            remove_quietly(property_file)

        remove_quietly(workdir)

    return request.archive_path


class GenomeArchiver:
    def __init__(self, args):
        """Builds a .genome archive from command line arguments."""
        self.request = ArchiveRequest.from_args(args)
        self.archive = None

    def run(self):
        print(self.display_options())
        self.archive = create_genome_archive(self.request)
        print(self.display_summary())
        return 0

    def display_options(self):
        """Returns a string describing all input args"""
        request = self.request
        options_string = "\n/| genomepack create |\\\n¯¯¯¯¯¯¯¯¯¯¯¯¯¯¯¯¯¯¯¯¯¯¯\n"
        options_string += "  Output archive:     {}\n".format(request.archive_path)
        options_string += "  Genome id:          {}\n".format(request.genome_id)
        options_string += "  Genome name:        {}\n".format(request.display_name)
        options_string += "  Sequence file:      {}\n".format(request.sequence_file)
        options_string += "  Sequence location:  {}\n".format(request.effective_sequence_location())
        options_string += "  Gene file:          {}\n".format(request.gene_file)
        options_string += "  Cytoband file:      {}\n".format(request.cytoband_file)
        options_string += "  Alias file:         {}\n".format(request.alias_file)
        options_string += "  Working directory:  {}\n".format(request.working_directory)
        return options_string

    def display_summary(self):
        with zipfile.ZipFile(self.archive, 'r') as archive:
            names = archive.namelist()

        summary_string = 'Genome archive written to ({}).\n'.format(self.archive)
        summary_string += 'Archive members: {}\n'.format(', '.join(names))
        return summary_string

if __name__ == '__main__':
    args = vars(parser.parse_args())
    obj = GenomeArchiver(args)
    sys.exit(obj.run())
