"""
Arrange the expander's output into a rectangle of fixed width.

Brainfuck-family programs do not care about line breaks, so this is purely cosmetic.
The policy is simple and never fails: a break goes after every `width`-th character,
the last row may come up short (no padding, nothing dropped), and there is never a
trailing break. A width of zero means "don't": the text comes back untouched.
"""

def rows(text:str, width:int) -> list[str]:
	if not text: return []
	if width <= 0: return [text]
	return [text[i:i+width] for i in range(0, len(text), width)]

def rectangle(text:str, width:int) -> str:
	if width <= 0: return text
	return '\n'.join(rows(text, width))
