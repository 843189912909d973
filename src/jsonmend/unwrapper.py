"""Strip one enclosing quote pair from copied string literals and decode the body.

A double-quoted body is first read as a JSON string; when that fails, or the
text is single-quoted or not quoted at all, the permissive escape decoder is
used instead.
"""

from __future__ import annotations

import logging
from typing import List

from jsonmend.decoder import EscapeDecoder, JsonStringDecoder
from jsonmend.error import EmptyInputError, StrictDecodeError
from jsonmend.types import IDecodeStrategy, QuoteWrapper, RuleSet

logger = logging.getLogger(__name__)


class StrictStrategy:
    name = "strict"

    def decode(self, text: str) -> str:
        return JsonStringDecoder().decode(text)


class PermissiveStrategy:
    name = "permissive"

    def __init__(self, pair_surrogates: bool | None = None) -> None:
        self.pair_surrogates = pair_surrogates

    def decode(self, text: str) -> str:
        decoder = EscapeDecoder(RuleSet.UNESCAPE, pair_surrogates=self.pair_surrogates)
        return decoder.decode(text)


def classify_quote_wrapper(text: str) -> QuoteWrapper:
    if not text:
        return QuoteWrapper.NONE
    for wrapper in (QuoteWrapper.DOUBLE, QuoteWrapper.SINGLE):
        if text[0] == wrapper.value and text[-1] == wrapper.value:
            return wrapper
    return QuoteWrapper.NONE


def strip_quote_wrapper(text: str, wrapper: QuoteWrapper) -> str:
    if wrapper is QuoteWrapper.NONE:
        return text
    return text[1:-1]


def select_strategies(
    wrapper: QuoteWrapper, pair_surrogates: bool | None = None
) -> List[IDecodeStrategy]:
    """
    Return the strategies to try, in order. The last one is always
    permissive and never fails.
    """
    permissive = PermissiveStrategy(pair_surrogates)
    if wrapper is QuoteWrapper.DOUBLE:
        return [StrictStrategy(), permissive]
    return [permissive]


def advanced_unescape(text: str, *, pair_surrogates: bool | None = None) -> str:
    trimmed = text.strip()
    if not trimmed:
        raise EmptyInputError("nothing to unescape")

    wrapper = classify_quote_wrapper(trimmed)
    body = strip_quote_wrapper(trimmed, wrapper)
    *attempts, permissive = select_strategies(wrapper, pair_surrogates)

    for strategy in attempts:
        try:
            return strategy.decode(body)
        except StrictDecodeError as e:
            logger.debug(
                "%s decode of %s-quoted text failed, falling back: %s",
                strategy.name,
                wrapper.name.lower(),
                e,
            )
    return permissive.decode(body)
