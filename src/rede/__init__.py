"""Rede community account service."""
