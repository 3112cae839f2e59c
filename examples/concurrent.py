"""
Concurrent Rendering Example

This demonstrates rendering with `begin()`/`end()` from concurrent asyncio
tasks. Each task has its own stack of opened tags, so the tasks can interleave
freely.

Usage:
    python concurrent.py
"""

import asyncio
from htmltag import Article, Div, P
from htmltag.utils.logging import info


async def card(name: str, delay: float) -> str:
	res = [Article.tag().setId(name).begin()]
	await asyncio.sleep(delay)
	res.append(P.tag().content(f"Card {name}, rendered after {delay}s").render())
	res.append(Article.end())
	return "".join(res)


async def main() -> None:
	cards = await asyncio.gather(*(card(f"card-{i}", 0.1 * (3 - i)) for i in range(3)))
	print(Div.tag().setClass("cards").html("\n".join(cards)).render())


if __name__ == "__main__":
	info("Rendering cards concurrently")
	asyncio.run(main())

# EOF
