"""
today
=====

A rolling, date-stamped daily note.

Each run makes sure there is an entry for the current day. When the most
recent entry belongs to an earlier day it is carried forward: its date
heading is rewritten to today's date and, optionally, sections nested deeper
than a chosen heading level are pruned ("declaring bankruptcy" on them).

Main Components:
    - core: Paths, configuration, logging, exceptions
    - utils: Entry file helpers and markdown line primitives
    - pipeline: Entry selection, forwarding, pruning and the CLI

Primary Interfaces:
    - today.pipeline.cli: Command-line entry point
    - today.pipeline.forward: create_or_forward, select_entry_action, transform
    - today.pipeline.bankruptcy: undergo_bankruptcy

Example Usage:
    >>> from datetime import date
    >>> from today.pipeline.forward import transform
    >>> transform(b"# 2024-01-01\\n- task\\n", date(2024, 1, 2), None)
    b'# 2024-01-02\\n- task\\n'
"""

__version__ = "1.0.0"
