"""
Unit tests mirroring the nls package layout.

Every test runs against mocked transports; nothing here opens a network
connection.
"""
