import pytest
import torch

from wordcodec import VocabularyCodec, decode_batch, encode_batch
from wordcodec.data import frame, unframe

device = "cuda" if torch.cuda.is_available() else "cpu"


def test_frame_wraps_tokens_in_start_and_end_markers():
    codec = VocabularyCodec()
    codec.learn("hello world")

    assert frame(codec, "hello world") == [2, 4, 5, 3]
    assert frame(codec, "") == [2, 3]


def test_unframe_keeps_character_codes_that_look_like_markers():
    # 2 and 3 are the codes of "B" and "C"
    tokens = [2, 999, 2, 3, 998, 4, 3, 0, 0]

    assert unframe(tokens) == [999, 2, 3, 998, 4]


def test_encode_batch_pads_to_longest_text():
    codec = VocabularyCodec()
    codec.learn("the cat sat on the mat")

    batch = encode_batch(codec, ["the cat", "the cat sat on the mat"], device=device)

    assert batch.shape == (2, 8), f"Expected shape (2, 8), got {batch.shape}"
    assert batch.dtype == torch.long
    assert batch[0].tolist() == [2, 4, 5, 3, 0, 0, 0, 0]


def test_encode_batch_truncates_to_context_size():
    codec = VocabularyCodec()
    codec.learn("one two three four")

    batch = encode_batch(
        codec, ["one two three four", "one"], context_size=4, device=device
    )

    assert batch.shape == (2, 4), f"Expected shape (2, 4), got {batch.shape}"
    assert batch.tolist() == [[2, 4, 5, 6], [2, 4, 3, 0]]


def test_batch_round_trip():
    codec = VocabularyCodec()
    codec.learn("good morning everyone")
    texts = ["Good morning", "good evening Everyone", "x"]

    batch = encode_batch(codec, texts, device=device)

    assert decode_batch(codec, batch) == [t.lower() for t in texts]


def test_encode_batch_rejects_bad_arguments():
    codec = VocabularyCodec()

    with pytest.raises(ValueError):
        encode_batch(codec, [])
    with pytest.raises(ValueError):
        encode_batch(codec, ["text"], context_size=0)
