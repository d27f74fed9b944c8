"""Dash web application."""
