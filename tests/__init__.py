"""Tests for the binary GA operators"""
