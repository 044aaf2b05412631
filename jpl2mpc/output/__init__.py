"""
Output Package
==============

Fixed-width record formatting and the two header placement strategies.
"""

from .record_writer import BufferedRecordWriter, InPlaceRecordWriter, format_record

__all__ = ['BufferedRecordWriter', 'InPlaceRecordWriter', 'format_record']
