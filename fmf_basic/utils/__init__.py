"""
Utility functions module.

Stateless helpers shared by callers that work with byte streams and text.

Stream Semantics:
- Sources and sinks are supplied, and closed, by the caller
- Bytes are moved through a fixed-size buffer until the source is exhausted
- I/O errors propagate unchanged; bytes already written are not rolled back
"""
