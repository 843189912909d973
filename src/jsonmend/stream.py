from typing import AsyncGenerator, AsyncIterable

from jsonmend.decoder import EscapeDecoder
from jsonmend.types import IDecoder, RuleSet


async def decode_stream(
    chunks: AsyncIterable[str],
    rule_set: RuleSet = RuleSet.PARSE_ESCAPE_SEQUENCES,
    *,
    pair_surrogates: bool | None = None,
) -> AsyncGenerator[str, None]:
    """
    Decode escapes across chunk boundaries, yielding text as soon as it is
    final. The concatenation of everything yielded equals the one-shot decode
    of the concatenated input.
    """
    decoder: IDecoder = EscapeDecoder(rule_set, pair_surrogates=pair_surrogates)
    async for chunk in chunks:
        decoded = "".join(piece for piece in map(decoder.push, chunk) if piece)
        if decoded:
            yield decoded
    tail = decoder.flush()
    if tail:
        yield tail
