#!/usr/bin/python
# -*- coding: utf-8 -*-

class GenomeArchiveError(Exception):
    """Base class for errors raised while building a genome archive."""


class ValidationError(GenomeArchiveError, ValueError):
    """The request was rejected before any file was touched."""


class ArchiveIOError(GenomeArchiveError, OSError):
    """A file system, index or zip step failed.
    The message names the step; the original exception is chained."""
