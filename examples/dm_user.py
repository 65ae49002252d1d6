import asyncio
import logging
import os
import sys

import parley


TOKEN = os.environ.get("PARLEY_TOKEN", "")


async def main(user_id: str) -> None:
    async with parley.Session.from_env() as session:
        me = await session.login()
        print("logged in as", me)

        user = await session.fetch_user(user_id)
        print(f"{user} ({user.mention}) avatar: {user.avatar_url(256)}")

        embed = parley.Embed(title="Hello", description=f"sent by {me}")
        await user.send_message(session, "hi from parley", embed)

        for message in await user.get_history(session, limit=5):
            print(message.id, message.author, message.content)


if __name__ == "__main__":
    if not TOKEN:
        raise SystemExit("Set PARLEY_TOKEN in the environment")
    if len(sys.argv) != 2:
        raise SystemExit("usage: dm_user.py USER_ID")
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main(sys.argv[1]))
