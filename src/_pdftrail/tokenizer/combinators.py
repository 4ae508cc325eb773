from _pdftrail.tokenizer.errors import TokenizationError


def bind(*tokenizers):
    """
    Combinator for tokenizers in sequence.

    :param tokenizers: List of tokenizers.
    :returns: Tokenizer yielding the tokens of each tokenizer in turn.
    """

    def sequence_tokenizer():
        for tokenizer in tokenizers:
            yield from tokenizer()

    return sequence_tokenizer


def one_of(*tokenizers):
    """
    Combinator for alternative tokenizers. As each tokenizer rewinds the
    stream when failing, every alternative starts at the same position.

    :param tokenizers: List of tokenizers, tried in order.
    :returns: A tokenizer that yields the tokens from the first tokenizer
        in tokenizers that succeeds.
    """

    def alternatives_tokenizer():
        reasons = []
        for tokenizer in tokenizers:
            try:
                yield from tokenizer()
                return
            except TokenizationError as err:
                reasons.append(str(err))

        raise TokenizationError(
            "No alternative matched, due to one of\n*" + "\n*".join(reasons)
        )

    return alternatives_tokenizer


def repeated(tokenizer):
    """
    Combinator applying a tokenizer zero or more times, until it fails.
    """

    def repeated_tokenizer():
        try:
            while True:
                yield from tokenizer()
        except TokenizationError:
            pass

    return repeated_tokenizer


def skip(tokenizer):
    """
    Run the tokenizer to completion, discarding its tokens.
    """
    for _ in tokenizer():
        pass
