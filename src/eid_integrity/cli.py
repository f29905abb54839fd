"""Verify card files dumped to disk against the issuer certificate."""

import argparse
import logging
import os
import sys

from . import config
from .errors import IntegrityError
from .integrity import RecordIntegrityChecker


def read_file(path):
    with open(path, "rb") as f:
        return f.read()


def optional_file(folder, explicit, default_name):
    """Explicit path if given, else the default dump name when it exists in ``folder``."""
    if explicit:
        return explicit
    path = os.path.join(folder, default_name)
    if os.path.exists(path):
        return path
    return None


def print_record(title, record):
    print("-" * 40)
    print(f"   {title}")
    print("-" * 40)
    for tag, value in record.items():
        if tag == config.PHOTO_DIGEST_TAG:
            shown = value.hex()
        else:
            shown = repr(value.decode("utf-8", errors="replace"))
        print(f"   {tag:3d}: {shown}")


def verify_nonrep(checker, certificate, args):
    print("\n[*] Verifying non-repudiation signature...")
    expected = bytes.fromhex(args.nonrep_digest)
    signature = read_file(args.nonrep_signature)
    if checker.verify_non_repudiation_signature(expected, signature, certificate):
        print("[V] Non-repudiation signature VALID.")
        return 0
    print("[X] Non-repudiation signature INVALID.")
    return 1


def verify_records(checker, certificate, args):
    identity_path = optional_file(args.dir, args.identity, config.IDENTITY_FILE)
    identity_sig_path = optional_file(args.dir, args.identity_sig, config.IDENTITY_SIGNATURE_FILE)
    if not identity_path or not identity_sig_path:
        print("[X] Identity file and identity signature are required.")
        return 1

    identity = read_file(identity_path)
    identity_sig = read_file(identity_sig_path)
    photo_path = optional_file(args.dir, args.photo, config.PHOTO_FILE)
    photo = read_file(photo_path) if photo_path else None

    print("\n[*] Verifying identity file...")
    record = checker.get_verified_identity(identity, identity_sig, certificate, photo=photo)
    print("    -> SUCCESS: identity signature verified.")
    if photo is not None:
        print("    -> SUCCESS: photo matches the identity file digest.")
    print_record("IDENTITY", record)

    address_path = optional_file(args.dir, args.address, config.ADDRESS_FILE)
    address_sig_path = optional_file(args.dir, args.address_sig, config.ADDRESS_SIGNATURE_FILE)
    if address_path and address_sig_path:
        print("\n[*] Verifying address file (chained to identity signature)...")
        address = checker.get_verified_address(
            read_file(address_path), identity_sig, read_file(address_sig_path), certificate)
        print("    -> SUCCESS: address signature verified.")
        print_record("ADDRESS", address)
    return 0


def build_parser():
    parser = argparse.ArgumentParser(
        prog="eid-integrity",
        description="Verify identity card files against the issuer certificate.")
    parser.add_argument("--cert", required=True, help="issuer certificate (DER or PEM)")
    parser.add_argument("--dir", default=".", help="folder holding the dumped card files")
    parser.add_argument("--identity", help=f"identity file (default: {config.IDENTITY_FILE})")
    parser.add_argument("--identity-sig", help=f"identity signature (default: {config.IDENTITY_SIGNATURE_FILE})")
    parser.add_argument("--photo", help=f"photo file (default: {config.PHOTO_FILE})")
    parser.add_argument("--address", help=f"address file (default: {config.ADDRESS_FILE})")
    parser.add_argument("--address-sig", help=f"address signature (default: {config.ADDRESS_SIGNATURE_FILE})")
    parser.add_argument("--nonrep-digest", help="expected digest (hex) of a non-repudiation signature")
    parser.add_argument("--nonrep-signature", help="non-repudiation signature value file")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s")

    print("--- eID Card Integrity Tool ---")
    checker = RecordIntegrityChecker()
    try:
        certificate = checker.load_certificate(read_file(args.cert))
        print(f"[*] Issuer: {certificate.subject.rfc4514_string()} "
              f"({certificate.key_type.value}, {certificate.signature_algorithm})")

        if args.nonrep_digest or args.nonrep_signature:
            if not (args.nonrep_digest and args.nonrep_signature):
                print("[X] --nonrep-digest and --nonrep-signature go together.")
                return 1
            return verify_nonrep(checker, certificate, args)

        status = verify_records(checker, certificate, args)
    except (IntegrityError, OSError, ValueError) as e:
        print(f"\n[X] VERIFICATION ERROR: {e}")
        return 1

    if status == 0:
        print("\n[V] CARD DATA VALID AND AUTHENTIC.")
    return status


if __name__ == "__main__":
    sys.exit(main())
