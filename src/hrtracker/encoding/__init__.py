"""Encoding layer — versioned binary codecs for primitives, time, and records.

Every encoder takes ``(value, sink, version, repr)`` and every decoder
``(source, version, repr)``; the version and primitive representation are
threaded through unchanged so each field picks its own layout rules.
"""
