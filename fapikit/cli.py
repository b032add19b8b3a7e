"""Command-line entry point: generate a token bundle or a signing key."""

import argparse
import json
import logging
import sys
from pathlib import Path

from fapikit.api.schemas import BundleResponse
from fapikit.core.settings import EndpointSettings, ServiceSettings
from fapikit.crypto.errors import TokenGenerationError
from fapikit.crypto.keys import generate_signing_keypair
from fapikit.oidc.session import TokenSession

logger = logging.getLogger(__name__)


def _generate(args: argparse.Namespace) -> int:
    try:
        pem = Path(args.key_file).read_text(encoding="utf-8")
    except OSError as exc:
        print(f"Cannot read key file {args.key_file}: {exc.strerror}", file=sys.stderr)
        return 1

    session = TokenSession(EndpointSettings())
    try:
        bundle = session.generate(args.client_id, pem, args.access_token)
    except TokenGenerationError as exc:
        print(f"{exc.code}: {exc.message}", file=sys.stderr)
        return 1

    response = BundleResponse.from_bundle(bundle, session.settings, args.access_token)
    exclude = None if args.recipes else {"recipes"}
    print(json.dumps(response.model_dump(by_alias=True, exclude=exclude), indent=2))
    return 0


def _keygen(args: argparse.Namespace) -> int:
    out = Path(args.out)
    if out.exists() and not args.force:
        print(f"{out} already exists (use --force to overwrite)", file=sys.stderr)
        return 1

    key = generate_signing_keypair()
    out.write_text(key.private_key_pem, encoding="utf-8")
    out.chmod(0o600)
    logger.info("Wrote P-256 signing key to %s", out)

    jwk = {
        **key.public_jwk.model_dump(),
        "use": "sig",
        "alg": "ES256",
        "kid": key.thumbprint,
    }
    print(json.dumps({"keys": [jwk]}, indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fapikit",
        description="Generate client assertions and DPoP proofs for FAPI testing",
    )
    parser.add_argument(
        "--log-level",
        default=ServiceSettings().log_level,
        help="Logging level (default: %(default)s)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Print a client assertion and DPoP proofs")
    gen.add_argument("--client-id", required=True, help="OAuth client identifier")
    gen.add_argument(
        "--key-file",
        required=True,
        help="PKCS8 PEM file with the ES256 client signing key",
    )
    gen.add_argument(
        "--access-token",
        default=None,
        help="Access token to bind to the USERINFO proof via ath",
    )
    gen.add_argument(
        "--recipes",
        action="store_true",
        help="Include per-endpoint request recipes in the output",
    )
    gen.set_defaults(func=_generate)

    keygen = sub.add_parser("keygen", help="Create a P-256 client signing key")
    keygen.add_argument("--out", required=True, help="Path for the PKCS8 PEM file")
    keygen.add_argument("--force", action="store_true", help="Overwrite --out")
    keygen.set_defaults(func=_keygen)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
