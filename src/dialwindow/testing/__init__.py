"""Testing helpers – fakes, pytest fixtures and Hypothesis strategies.

Subpackages import pytest / hypothesis; install the ``testing`` extra.
"""
