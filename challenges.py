#!/usr/bin/env python3

# standard library modules
import cProfile
import os
import pprint as pprint_module
import re
import sys
import traceback
import warnings

from argparse import ArgumentParser
from contextlib import redirect_stdout


# modules in this project
import english
import util


warnings.simplefilter("default", BytesWarning)
warnings.simplefilter("default", ResourceWarning)
warnings.simplefilter("default", DeprecationWarning)


def pprint(*args, width=120, **kwargs):
    pprint_module.pprint(*args, width=width, **kwargs)


def challenge1():
    """Convert hex to base64"""
    encoded_text = ("49276d206b696c6c696e6720796f757220627261696e206c696b65206120706f6973"
                    "6f6e6f7573206d757368726f6f6d")
    message = util.hex_to_bytes(encoded_text)
    print(message.decode())
    result = util.bytes_to_base64(message)
    print(result)

    assert result == "SSdtIGtpbGxpbmcgeW91ciBicmFpbiBsaWtlIGEgcG9pc29ub3VzIG11c2hyb29t"


def challenge2():
    """Fixed XOR"""
    output = util.xor_bytes(
        util.hex_to_bytes("1c0111001f010100061a024b53535009181c"),
        util.hex_to_bytes("686974207468652062756c6c277320657965"))
    print(output.decode())
    print(util.bytes_to_hex(output))
    assert util.bytes_to_hex(output) == "746865206b696420646f6e277420706c6179"


def challenge3():
    """Single-byte XOR cipher"""
    cipher_hex = "1b37373331363f78151b7f2b783431333d78397828372d363c78373e783a393b3736"
    ciphertext = util.hex_to_bytes(cipher_hex)
    pprint(english.rank_byte_xor_candidates(ciphertext, 5))
    best_data = english.best_byte_xor_score_data(ciphertext)
    print("key: {}".format(best_data.key_char))
    print(best_data.message.decode())
    assert best_data.key == ord("X")
    assert best_data.message == b"Cooking MC's like a pound of bacon"


class ChallengeNotFoundError(ValueError):
    pass


def get_challenges(challenge_nums):
    result = []
    for num in challenge_nums:
        fn = globals().get("challenge" + str(num))
        if not callable(fn):
            raise ChallengeNotFoundError("challenge {} not found".format(num))
        result.append(fn)
    return result


def get_all_challenges():
    challenges = {}
    for name, var in globals().items():
        try:
            num = int(re.findall(r"^challenge(\d+)$", name)[0])
        except IndexError:
            pass
        else:
            if callable(var):
                challenges[num] = var
    return [challenges[num] for num in sorted(challenges)]


def run_challenges(challenges, quiet=False, profile=None):
    """Run each challenge, printing whether it passed.

    Returns the number of challenges that failed.
    """
    failures = 0
    with open(os.devnull, "w") as null_stream:
        output_stream = null_stream if quiet else sys.stdout
        for challenge in challenges:
            num = re.findall(r"^challenge(.+)$", challenge.__name__)[0]
            print("Running challenge {}: {}".format(num, challenge.__doc__))
            try:
                with redirect_stdout(output_stream):
                    if profile:
                        profile.runcall(challenge)
                    else:
                        challenge()
            except Exception:
                traceback.print_exc()
                failures += 1
            else:
                print("Challenge {} passed.".format(num))
    return failures


def main(argv=None):
    parser = ArgumentParser(
        description="Run the hex, Base64, fixed XOR and single-byte XOR self-checks.")
    parser.add_argument(
        "challenges", nargs="*",
        help="Challenge(s) to run. If not specified, all challenges will be run.")
    parser.add_argument(
        "-p", "--profile", help="Profile challenges.", action="store_true")
    parser.add_argument(
        "-q", "--quiet", help="Don't show challenge output.", action="store_true")
    args = parser.parse_args(argv)
    try:
        challenges = get_challenges(args.challenges) or get_all_challenges()
    except ChallengeNotFoundError as e:
        parser.error(e)

    profile = cProfile.Profile() if args.profile else None
    try:
        failures = run_challenges(challenges, quiet=args.quiet, profile=profile)
    finally:
        if profile:
            print()
            profile.print_stats(sort="cumulative")
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
