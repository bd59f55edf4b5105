"""Test suite for the Pokédex backend and client."""
