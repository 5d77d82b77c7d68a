import argparse
import getpass
import sys

from hclink.clients import EventKind, RefreshLoop, Session
from hclink.config import DEMO_HUB_ADDRESS, get_settings
from hclink.domain.view import format_info, format_values
from hclink.exceptions import HubError

USAGE = f"""Usage: hclink [address]

  Example: hclink styx.fibaro.com:7777

  If address is omitted, runs demo with address {DEMO_HUB_ADDRESS}
"""


def _ask_yes() -> bool:
    try:
        return input().strip().lower() == "y"
    except EOFError:
        return False


def _print_values(session: Session) -> None:
    for line in format_values(session.snapshot()):
        print(line)


def stream(session: Session) -> int:
    loop = RefreshLoop(session)
    print("Initializing data update (press CTRL+C to exit)")
    loop.start()
    print("Awaiting response from the server")
    try:
        while True:
            event = loop.events.get()
            if event.kind is EventKind.FAILURE:
                print(event.error)
                print(f"Did not receive status within {session.settings.request_timeout:g} seconds. Retrying.")
                continue
            print("----- (CTRL+C to exit) -----")
            for line in format_values(list(event.readings)):
                print(line)
    except KeyboardInterrupt:
        print("\nGoodbye!")
    finally:
        loop.stop(timeout=1.0)
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Mirror the device states of a home center hub.")
    parser.add_argument("address", nargs="?", default=None, help="Base address of the hub, e.g. styx.fibaro.com:7777")
    args = parser.parse_args(argv)

    settings = get_settings()
    address = args.address
    if address is None:
        print(USAGE)
        address = settings.hub_address

    session = Session.connect(address, settings=settings)
    try:
        login = input("Login: ").strip()
        password = getpass.getpass("Password: ")
        session.login(login, password)
        print("Access granted")

        print("Retrieving devices information")
        count = session.load_inventory()
        print(f"Found {count} {'device.' if count == 1 else 'devices.'} Would you like to list them? (y/n)")
        if _ask_yes():
            for device in session.devices:
                print(format_info(device))

        print("\nFound following temperature sensors: ")
        _print_values(session)

        print("Would you like to start refreshing the devices? (y/n)")
        if _ask_yes():
            return stream(session)

        print("Retrieving a single update")
        session.start_streaming()
        session.refresh_once()
        _print_values(session)
        return 0
    except HubError as exc:
        print(f"{exc}\nExiting.", file=sys.stderr)
        return 1
    except (EOFError, KeyboardInterrupt):
        print("\nExiting.", file=sys.stderr)
        return 1
    finally:
        session.close()


if __name__ == "__main__":
    sys.exit(main())
