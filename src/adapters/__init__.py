"""Adapters: stdin/stdout line I/O and spec export."""
