import argparse
import json
import os
import sys
from dataclasses import asdict
from datetime import datetime

from .config import K1ngConfig, get_default_config_dir
from .core import TIME_FORMAT_MYSQL_DATETIME, format_mysql_datetime
from .exceptions import K1ngError
from .logging_config import setup_logging, get_logger
from .sms import Channel

logger = get_logger(__name__)


def parse_schedule_time(value: str) -> datetime:
    try:
        return datetime.strptime(value, TIME_FORMAT_MYSQL_DATETIME)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected 'YYYY-MM-DD HH:MM:SS', got {value!r}")


def parse_channel(value: str) -> Channel:
    try:
        return Channel.parse(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def cmd_send_sms(args: argparse.Namespace) -> int:
    """Send an SMS message"""
    try:
        config = K1ngConfig(args.config)
        sms = config.create_sms()

        if args.sender_id:
            sms.set_sender_id(args.sender_id)
        if args.channel:
            sms.set_channel(args.channel)
        if args.template:
            sms.set_template(args.template)
        if args.to:
            # Recipients on the command line replace the configured ones
            sms.empty_destinations().add_destinations(*args.to)
        sms.set_content(args.message)

        if args.at:
            logger.info(f"Scheduling SMS for {format_mysql_datetime(args.at)}")
            response = sms.send_at(args.at)
        else:
            response = sms.send()

        if args.verbose:
            print(json.dumps(asdict(response), indent=2))
        else:
            print(f"SMS submitted: {response.message} ({response.count} message(s))")
            for result in response.results:
                print(f"  {result.destination}: {result.status_message} [id {result.id or 'N/A'}]")

        return 1 if response.has_errors else 0
    except (K1ngError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_init(args: argparse.Namespace) -> int:
    """Create the config directory and write config.json"""
    config_dir = args.config_dir or get_default_config_dir()
    config_path = os.path.join(config_dir, "config.json")

    print(f"Initializing K1NG client in: {config_dir}")

    if os.path.exists(config_path) and not args.force:
        print(f"File already exists: {config_path}")
        print("Use --force to overwrite existing files")
        return 1

    try:
        os.makedirs(config_dir, exist_ok=True)
    except OSError as e:
        print(f"Failed to create config directory: {e}", file=sys.stderr)
        return 1

    config_data = {
        "host_url": args.host_url,
        "api_key": args.api_key,
        "api_pass": args.api_pass,
        "sender_id": args.sender_id,
        "channel": args.channel.value if args.channel else None,
    }

    # Remove None values
    config_data = {k: v for k, v in config_data.items() if v is not None}

    try:
        with open(config_path, 'w') as f:
            json.dump(config_data, f, indent=2)
        # Holds the API password
        os.chmod(config_path, 0o600)
    except OSError as e:
        print(f"Failed to create config file: {e}", file=sys.stderr)
        return 1

    print(f"Created config file: {config_path}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="k1ng-cli", description="K1NG SMS client utilities")
    p.add_argument("--log-level", default=None, help="Logging level: DEBUG, INFO, WARNING, ERROR or CRITICAL (default: LOG_LEVEL env or WARNING)")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_init = sub.add_parser("init", help="Write a config file", description="Create the config directory and write config.json with the API host and credentials.")
    p_init.add_argument("--config-dir", help="Config directory (default: XDG_CONFIG_HOME/k1ng or ~/.config/k1ng)")
    p_init.add_argument("--host-url", required=True, help="K1NG API host URL")
    p_init.add_argument("--api-key", required=True, help="API key")
    p_init.add_argument("--api-pass", required=True, help="API password")
    p_init.add_argument("--sender-id", help="Default sender ID")
    p_init.add_argument("--channel", type=parse_channel, help="Default channel: regular, otp, default or long-number")
    p_init.add_argument("--force", action="store_true", help="Overwrite existing files")
    p_init.set_defaults(func=cmd_init)

    p_send = sub.add_parser("send", help="Send an SMS message", description="Send an SMS message using the configured K1NG API.")
    p_send.add_argument("message", help="Message to send (comma-separated placeholder values when --template is used)")
    p_send.add_argument("--to", action="append", help="Recipient phone number, repeatable (overrides config)")
    p_send.add_argument("--sender-id", help="Sender ID (overrides config)")
    p_send.add_argument("--channel", type=parse_channel, help="Channel: regular, otp, default or long-number (overrides config)")
    p_send.add_argument("--template", help="Template name")
    p_send.add_argument("--at", type=parse_schedule_time, help="Schedule time, 'YYYY-MM-DD HH:MM:SS'")
    p_send.add_argument("--config", default=None, help="Config file path (default: auto-detect from config directory)")
    p_send.add_argument("--verbose", "-v", action="store_true", help="Print the full JSON response (default: False)")
    p_send.set_defaults(func=cmd_send_sms)

    return p


def main(argv=None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        setup_logging(args.log_level)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
