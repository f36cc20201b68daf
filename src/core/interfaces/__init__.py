"""Interfaces of the Core.

Contracts (Protocol) implemented by concrete adapters, so the pipeline depends
on abstractions rather than on a particular random source.
"""
