"""CLI layer — argument parsing, user interaction, and error boundaries.

This package is the outermost layer of the application.  It may import
from ``core``, ``infra``, and ``utils``, but no other layer may import
from ``cli``.

Entry points
------------
* ``ytgrab``          — :mod:`ytgrab.cli.app`
* ``ytgrab-archive``  — :mod:`ytgrab.cli.archive`
* ``ytgrab-batch``    — :mod:`ytgrab.cli.batch`
"""
