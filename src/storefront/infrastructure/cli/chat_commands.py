"""CLI command for the technical-consultant chat."""

from __future__ import annotations

import click

from storefront.application.assistant_chat import GREETING, AssistantChat
from storefront.infrastructure.bootstrap import chat_adapter, product_repository

EXIT_WORDS = ("exit", "quit")


@click.command("chat")
@click.option("--message", "-m", default=None, help="Ask a single question and exit.")
def chat(message: str | None) -> None:
    """Talk to the technical consultant."""
    adapter = chat_adapter()
    if adapter is None:
        raise click.ClickException("Chat needs OPENAI_API_KEY to be set.")

    session = AssistantChat(chat_adapter=adapter, product_repo=product_repository())

    if message is not None:
        reply = session.send(message)
        if reply is not None:
            click.echo(reply)
        return

    click.echo(GREETING)
    click.echo("(type 'exit' to leave)")
    while True:
        text = click.prompt("you", default="", show_default=False)
        if text.strip().lower() in EXIT_WORDS:
            break
        reply = session.send(text)
        if reply is not None:
            click.echo(f"lumina: {reply}")
