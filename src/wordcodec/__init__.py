import logging

from .alphabet import ALPHA_END, ALPHA_START, AlphanumericTable
from .codec import (
    InvalidTokenError,
    VocabularyCodec,
    VocabularySnapshot,
    WordEncoding,
    parse_token_ids,
)
from .corpus import learn_daily_vocabulary
from .data import decode_batch, encode_batch

MENU = """
=== Word Codec Menu ===
1. Train vocabulary (learn from text)
2. Basic training (built-in daily vocabulary)
3. Encode text
4. Decode token ids
5. View current vocabulary
6. Exit"""


def print_vocab_size(codec: VocabularyCodec) -> None:
    snapshot = codec.snapshot()
    print(f"Total vocabulary size: {len(snapshot)}")
    print(f"Next available id: {snapshot.next_id}")


def print_vocab(codec: VocabularyCodec) -> None:
    snapshot = codec.snapshot()
    for word, word_id in sorted(snapshot.words.items(), key=lambda entry: entry[1]):
        print(f'{word_id}: "{word}"')
    print_vocab_size(codec)
    print("Alphanumeric encoding: A-Z: 1-26, a-z: 27-52, 0-9: 53-62")
    print(
        f"Special tokens: {ALPHA_START} (start alphanumeric), "
        f"{ALPHA_END} (end alphanumeric)"
    )


def train_from_text(codec: VocabularyCodec, text: str) -> None:
    if not text.strip():
        print("No text entered.")
        return
    codec.learn(text)
    print(f'Learned vocabulary from: "{text}"')
    print_vocab_size(codec)


def basic_training(codec: VocabularyCodec) -> None:
    added = learn_daily_vocabulary(codec)
    print(f"Learned {added} words of daily vocabulary.")
    print_vocab_size(codec)


def encode_text(codec: VocabularyCodec, text: str) -> None:
    if not text.strip():
        print("No text entered.")
        return
    print(f"Encoded tokens: {codec.encode(text)}")
    for entry in codec.breakdown(text):
        if entry.known:
            print(f'  "{entry.word}" -> {entry.id} (known word)')
        else:
            print(f'  "{entry.word}" -> {entry.tokens} (alphanumeric mode)')


def decode_tokens(codec: VocabularyCodec, text: str) -> None:
    try:
        tokens = parse_token_ids(text)
    except InvalidTokenError as e:
        print(f"Error parsing token ids: {e}")
        return
    if not tokens:
        print("No token ids entered.")
        return
    print(f"Token ids: {tokens}")
    print(f'Decoded text: "{codec.decode(tokens)}"')


def main() -> None:
    logging.basicConfig(level=logging.WARNING)
    codec = VocabularyCodec()

    while True:
        print(MENU)
        try:
            choice = input("Enter your choice (1-6): ").strip()
            match choice:
                case "1":
                    train_from_text(codec, input("Text to learn from: "))
                case "2":
                    basic_training(codec)
                case "3":
                    encode_text(codec, input("Text to encode: "))
                case "4":
                    print('Separate ids with spaces or commas, e.g. "4 999 50 998"')
                    decode_tokens(codec, input("Token ids: "))
                case "5":
                    print_vocab(codec)
                case "6":
                    break
                case _:
                    print("Invalid choice. Please enter 1-6.")
        except EOFError:
            break
    print("Goodbye!")
