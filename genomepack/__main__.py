#!/usr/bin/env python
# coding: utf-8
"""

    /|| genomepack ||\\
    ¯¯¯¯¯¯¯¯¯¯¯¯¯¯¯¯¯¯
    Reference genome packaging
    for .genome archives
"""

import logging, logging.config
import sys

from .core.argument_parsers import main_parser as parser
from .core.errors import ValidationError

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'default': {
            'format': '%(asctime)s %(levelname)s %(name)s %(message)s'
        },
    },
    'handlers': {
        'stdout':{
            'class' : 'logging.StreamHandler',
            'stream'  : 'ext://sys.stdout',
            'formatter': 'default',
        },
        'stderr':{
            'class' : 'logging.StreamHandler',
            'stream'  : 'ext://sys.stderr',
            'level':'ERROR',
            'formatter': 'default',
        },
    },
    'root': {
        'handlers': ['stdout','stderr'],
        'level': 'INFO',
    },
}

log = logging.getLogger()

def import_object(object_name):
    """Imports only the object needed to execute the subcommand."""
    if object_name == 'Helper':
        from .core.argument_parsers import Helper
        objectClass = Helper
    elif object_name == 'GenomeArchiver':
        from .core.genome_archive import GenomeArchiver
        objectClass = GenomeArchiver
    elif object_name == 'ArchiveInspector':
        from .core.genome_property import ArchiveInspector
        objectClass = ArchiveInspector
    elif object_name == 'Indexer':
        from .core.fasta_index import Indexer
        objectClass = Indexer
    elif object_name == 'CytobandWriter':
        from .core.fasta_lengths import CytobandWriter
        objectClass = CytobandWriter
    else:
        return None

    return objectClass

def main(argv=None):
    """Passes commandline options to subfunctions."""
    logging.config.dictConfig(LOGGING)
    args = vars(parser.parse_args(argv))
    try:
        log_level = args['log_level']
        log.setLevel(log_level)
        objectClass = import_object(args['object'])
        if objectClass is None:
            log.error('Subcommand not recognized. See genomepack --help')
            return 1

        obj = objectClass(args)
        return obj.run()
    except KeyboardInterrupt:
        return 0
    except ValidationError as e:
        log.error(e)
        return 1
    except Exception as e:
        log.exception(e)
        return 2

if __name__ == '__main__':
    sys.exit(main())
