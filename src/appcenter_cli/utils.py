"""Utility functions for CLI operations."""

import asyncio

import click


def run_async(coro):
    """Helper to run async functions synchronously in Click commands."""
    return asyncio.run(coro)


def info(message: str) -> None:
    click.echo(message)


def warning(message: str) -> None:
    click.secho(message, fg="yellow", err=True)
