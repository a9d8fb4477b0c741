# ---------------------------------------------------------
# Interactive front end for the trit glyph ciphers
# ---------------------------------------------------------
# Menu loop:
# 1. Static substitution encode
# 2. Delta-K encode
# 3. Delta-K decode
# 4. New message
# 5. Exit
# Keys are asked for until a valid one (or "0" for none) is typed.
# ---------------------------------------------------------

import argparse
import logging

from glyph_cipher import (
    GlyphCipherError,
    decode_trit,
    encode_static,
    encode_trit,
    is_valid_substitution_key,
    is_valid_trit_key,
    key_fingerprint,
)

logger = logging.getLogger(__name__)

# Typing this at the key prompt selects the unkeyed cipher
NO_KEY_SENTINEL = "0"


def read_key(is_valid):
    """Prompts until the key passes is_valid. Returns None for no key."""
    while True:
        key = input(f"Enter key ({NO_KEY_SENTINEL} for normal cipher): ").strip()
        if key == NO_KEY_SENTINEL:
            return None
        if is_valid(key):
            return key
        print("Key invalid. Try again.")


def run_choice(choice, message):
    # returns the output text, or None for an unknown choice
    if choice == '1':
        key = read_key(is_valid_substitution_key)
        result = encode_static(message, key)
    elif choice == '2':
        key = read_key(is_valid_trit_key)
        result = encode_trit(message, key)
    elif choice == '3':
        key = read_key(is_valid_trit_key)
        result = decode_trit(message, key)
    else:
        return None

    if key is not None:
        print("Key fingerprint:", key_fingerprint(key))
    return result


def main(argv=None):
    parser = argparse.ArgumentParser(description="Trit glyph cipher (static substitution and Delta-K).")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="logging level (default: WARNING)")
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    message = input("Enter message: ")   # user input

    while True:  # menu loop
        print("\nChoose operation:")
        print("1. Static substitution encode")
        print("2. Delta-K encode")
        print("3. Delta-K decode")
        print("4. New message")
        print("5. Exit")

        choice = input("Enter choice (1-5): ").strip()

        if choice == '4':
            message = input("Enter message: ")
            continue
        if choice == '5':   # exit option
            print("Exiting program.")
            return 0

        try:
            result = run_choice(choice, message)
        except GlyphCipherError as e:   # malformed ciphertext, bad key
            logger.info("operation %s failed: %s", choice, e)
            print("Error:", e)
            continue

        if result is None:
            print("Invalid choice, try again.")
        else:
            print("Result:", result)


# Entry point for program execution
if __name__ == "__main__":
    raise SystemExit(main())
