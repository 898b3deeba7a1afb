"""Core line classification and finalization.

WHY: The core package is the only place where decisions about the generated
document are made. Everything around it (reading files, writing output,
parsing arguments) is plumbing.

HOW: state.py defines the per-file value types, classifier.py decides the
fate of each line, finalizer.py closes the stream, and stream.py threads
the state between them for callers that have an iterable of lines.

RULES:
- No module in this package performs I/O or logs
- classify() and finalize() are pure functions of their arguments
"""
