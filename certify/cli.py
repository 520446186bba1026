# certify/cli.py
"""
Issue a self-signed certificate for a host.
Usage: certify [NAME] [-a ALT ...] [--dns] [-o FILE.PEM] [--rsa KEY.PEM | --bits N]
               [--days N] [--role ca|server|client]
Produces:
  FILE.PEM  private key followed by the certificate (default certify.pem)
"""
import os
import sys
import socket
import logging
import argparse

from pydantic import ValidationError

from certify.common.config import CertifyConfig, GenerateKey, LoadKey, Role
from certify.common.errors import CertifyError
from certify.common.utils import hostnames
from certify.crypto import rng
from certify.pipeline import selfsign

log = logging.getLogger("certify")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="certify", description="issue a self-signed certificate for a host")
    p.add_argument("name", nargs="?", default="localhost", metavar="NAME",
                   help="hostname for certificate")
    p.add_argument("-a", "--alt", action="append", default=[], metavar="ALT",
                   help="add alternative hostname (repeatable)")
    p.add_argument("--dns", action="store_true",
                   help="use gethostname() results for alternative names")
    p.add_argument("-o", "--out", "--pem", dest="out", default=None, metavar="FILE.PEM",
                   help="target for PEM key and certificate")
    key = p.add_mutually_exclusive_group()
    key.add_argument("--rsa", default=None, metavar="rsa.pem",
                     help="use this private RSA key file")
    key.add_argument("--bits", type=int, default=None,
                     help="RSA key length when generating a key")
    p.add_argument("--days", type=int, default=None, help="validity in days")
    p.add_argument("--role", choices=[r.value for r in Role], default=Role.SERVER.value,
                   help="certificate purpose")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return p


def init_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else os.environ.get("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s %(message)s")


def config_from_args(args: argparse.Namespace) -> CertifyConfig:
    alt_names = list(args.alt)
    if args.dns:
        alt_names += hostnames()

    values = {"common_name": args.name, "alt_names": alt_names, "role": args.role}
    if args.rsa is not None:
        values["key_source"] = LoadKey(path=args.rsa)
    elif args.bits is not None:
        values["key_source"] = GenerateKey(bits=args.bits)
    if args.days is not None:
        values["days"] = args.days
    if args.out is not None:
        values["out"] = args.out
    return CertifyConfig(**values)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    init_logging(args.verbose)

    try:
        config = config_from_args(args)
    except (ValidationError, socket.gaierror) as e:
        print(f"certify: invalid configuration: {e}", file=sys.stderr)
        return 2

    try:
        rng.initialize()
        selfsign(config)
    except CertifyError as e:
        log.debug("certificate pipeline failed", exc_info=True)
        print(f"certify: error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
