# command.py

import argparse
import time
from argparse import Namespace

from prompt_toolkit.keys import Keys

from cmdpane import CommandArgumentParser, CommandLine, Config, Rect, ScreenCanvas, SourceExhausted


def build_parser() -> CommandArgumentParser:
    """Grammar the demo accepts on its input line."""
    parser = CommandArgumentParser(
        prog="myapp",
        description="Does awesome things",
        version="%(prog)s 1.0",
    )
    parser.add_argument('-c', '--config', metavar='FILE',
        help='Sets a custom config file')
    parser.add_argument('INPUT',
        help='Sets the input file to use')
    parser.add_argument('-v', action='count', default=0,
        help='Sets the level of verbosity')
    subcommands = parser.add_subparsers(dest='subcommand')
    test = subcommands.add_parser('test', help='controls testing features')
    test.add_argument('-d', '--debug', action='store_true',
        help='print debug information verbosely')
    return parser


def handle_matches(matches: Namespace) -> list[str]:
    output = [
        f"Value for config: {matches.config or 'default.conf'}",
        f"Using input file: {matches.INPUT}",
    ]
    # Vary the output based on how many times -v was given
    output.append({
        0: "No verbose info",
        1: "Some verbose info",
        2: "Tons of verbose info",
    }.get(matches.v, "Don't be crazy"))

    if matches.subcommand == 'test':
        output.append("Printing debug info..." if matches.debug else "Printing normally...")
    return output


def draw(canvas: ScreenCanvas, cli: CommandLine) -> None:
    screen = canvas.area().inset(1)
    header_height = max(3, screen.height // 10)
    input_height = 3
    output_height = max(2, screen.height - header_height - input_height)

    header = Rect(screen.x, screen.y, screen.width, header_height)
    output = Rect(screen.x, header.y + header_height, screen.width // 2, output_height)
    command = Rect(screen.x, output.y + output_height, screen.width, input_height)

    with canvas.frame():
        canvas.draw_frame(header, title="Block")
        canvas.draw_frame(output, title="Output")
        cli.render_output(canvas, Rect(output.x + 1, output.y + 1, output.width - 2, output.height - 2))
        canvas.draw_frame(command, title="Command")
        cli.render_input(canvas, Rect(command.x + 1, command.y + 1, command.width - 2, 1))


def main():
    parser = argparse.ArgumentParser(description='cmdpane demo')
    parser.add_argument('--exit-key', default='escape',
        help='Key that quits the demo (a single character or a prompt_toolkit key name)')
    parser.add_argument('--tick', type=float, default=0.25,
        help='Seconds between input polls')
    parser.add_argument('--enable-logging', action='store_true',
        help='Enable debug logging')
    parser.add_argument('--log-file',
        help='Log file path (use "-" for stdout)')
    args = parser.parse_args()

    exit_key = args.exit_key if len(args.exit_key) == 1 else Keys(args.exit_key)
    cli = CommandLine(
        build_parser(),
        handle_matches,
        config=Config(exit_key=exit_key, tick_interval=args.tick),
        logging_enabled=args.enable_logging,
        log_file=args.log_file,
    )
    cli.input_widget.set_prompt("prompt > ")
    cli.write_to_output("Type a command, e.g. 'input.txt -v test -d' or '--help'.")

    canvas = ScreenCanvas()
    with cli:
        try:
            while True:
                draw(canvas, cli)
                # Drain what arrived since the last frame, then wait a tick
                while cli.fetch_event():
                    pass
                time.sleep(cli.config.tick_interval / 5)
        except SourceExhausted:
            pass
        finally:
            canvas.clear()
            canvas.show_cursor()


if __name__ == "__main__":
    main()
