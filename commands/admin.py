"""Master-only commands."""
from typing import Iterable


def is_master(user, masters: Iterable[str]) -> bool:
	try:
		return str(user.id) in {str(m) for m in masters}
	except AttributeError:
		return False


async def handle_say(client, channel, user, args, ts, context) -> None:
	if not is_master(user, context.masters):
		await channel.send("You don't have permission to use that command.")
		return
	text = " ".join(args).strip()
	if not text:
		await channel.send(f"Usage: `{context.config.sign}{context.command} <text>`")
		return
	await channel.send(text)
