from collections.abc import Sequence

import torch
from torch.types import Tensor

from ..alphabet import ALPHA_END, ALPHA_START
from ..codec import END_ID, PAD_ID, START_ID, VocabularyCodec

device = "cuda" if torch.cuda.is_available() else "cpu"


def frame(codec: VocabularyCodec, text: str) -> list[int]:
    return [START_ID, *codec.encode(text), END_ID]


def unframe(tokens: Sequence[int]) -> list[int]:
    """Strip the markers `frame` and `encode_batch` add around a token stream."""
    out = []
    spelling = False
    for i, token in enumerate(tokens):
        # Character codes overlap the marker ids
        if spelling:
            out.append(token)
            spelling = token != ALPHA_END
            continue
        if token == END_ID:
            break
        if token == PAD_ID or (token == START_ID and i == 0):
            continue
        out.append(token)
        spelling = token == ALPHA_START
    return out


def encode_batch(
    codec: VocabularyCodec,
    texts: Sequence[str],
    context_size: int | None = None,
    device: str = device,
) -> Tensor:
    """Frame every text and right-pad the results into a (Batch, Time) tensor.

    Time is `context_size` if given, otherwise the longest framed text. Longer
    sequences are truncated.
    """
    if len(texts) == 0:
        raise ValueError("Cannot build a batch from no texts.")
    if context_size is not None and context_size <= 0:
        raise ValueError(f"Context size must be positive, got {context_size}.")

    sequences = [frame(codec, text) for text in texts]
    T = context_size if context_size is not None else max(len(s) for s in sequences)

    batch = torch.full((len(sequences), T), PAD_ID, dtype=torch.long)
    for row, sequence in enumerate(sequences):
        sequence = sequence[:T]
        batch[row, : len(sequence)] = torch.tensor(sequence, dtype=torch.long)
    return batch.to(device)


def decode_batch(codec: VocabularyCodec, batch: Tensor) -> list[str]:
    return [codec.decode(unframe(row)) for row in batch.tolist()]
