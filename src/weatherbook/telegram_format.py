"""Telegram message formatting utilities."""

import telegramify_markdown

# Telegram rejects messages over 4096 characters
MAX_CHUNK = 4000


def chunk_lines(text: str, limit: int = MAX_CHUNK) -> list[str]:
    """Split text into chunks of at most `limit` characters, on line boundaries where possible."""
    chunks: list[str] = []
    current = ""
    for line in text.splitlines(keepends=True):
        while len(line) > limit:
            if current:
                chunks.append(current)
                current = ""
            chunks.append(line[:limit])
            line = line[limit:]
        if len(current) + len(line) > limit:
            chunks.append(current)
            current = ""
        current += line
    if current:
        chunks.append(current)
    return chunks


async def reply_markdown(message, text: str):
    """Reply with markdown text converted to MarkdownV2.

    Only for fixed bot text; user-typed fields would be read as markup.
    """
    for chunk in chunk_lines(telegramify_markdown.markdownify(text)):
        await message.reply_text(chunk, parse_mode="MarkdownV2")


async def reply_plain(message, text: str):
    """Reply with text shown verbatim, split into Telegram-sized chunks."""
    for chunk in chunk_lines(text):
        await message.reply_text(chunk)
