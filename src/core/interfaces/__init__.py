"""Core interfaces/abstractions.

Contracts (Protocol) implemented by concrete adapters, so the core depends
on abstractions rather than on httpx or the filesystem.
"""
