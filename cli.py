"""
Command-Line Interface for chronofake

Provides commands for:
- sample: Print random dates, times or durations
- generate: Write a table of temporal columns
- config: Manage configurations
"""

import argparse
import sys
import logging
from datetime import timedelta
from typing import Optional
import pandas as pd
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape

from chronofake.config import Config, ConfigLoader, ConfigValidator, get_default_config
from chronofake.clock import Clock
from chronofake.generators import TemporalGenerator
from chronofake.provider import build_faker
from chronofake.utils import setup_logging, write_data

console = Console()

SAMPLE_KINDS = ['past', 'future', 'soon', 'recent', 'between', 'duration']


class CLI:
    """Main CLI class"""

    def __init__(self, clock: Optional[Clock] = None):
        self.parser = self._create_parser()
        self.config_loader = ConfigLoader()
        self.clock = clock

    def _create_parser(self) -> argparse.ArgumentParser:
        """Create argument parser"""
        parser = argparse.ArgumentParser(
            description="chronofake CLI",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # Five points from the last three days in Paris local time
  python cli.py sample recent --days 3 --count 5 --timezone Europe/Paris

  # A point between two dates
  python cli.py sample between --start 2020-01-01 --end 2020-01-10

  # Write the columns of a preset
  python cli.py generate out.csv --preset near_term --rows 200
            """
        )

        parser.add_argument(
            '--verbose', '-v',
            action='store_true',
            help='Enable verbose output'
        )

        parser.add_argument('--log-file', help='Also write logs to this file')

        subparsers = parser.add_subparsers(dest='command', help='Available commands')

        # Sample command
        sample_parser = subparsers.add_parser('sample', help='Print random temporal values')
        sample_parser.add_argument('kind', choices=SAMPLE_KINDS, help='Sampling policy')
        sample_parser.add_argument('--days', '-d', type=int, help='Window size in days')
        sample_parser.add_argument('--reference', '-r', help='Reference point for past/future')
        sample_parser.add_argument('--start', help='Start bound for between')
        sample_parser.add_argument('--end', help='End bound for between')
        sample_parser.add_argument('--max-days', type=float,
                                   default=get_default_config().temporal.duration_max_days,
                                   help='Maximum duration in days')
        sample_parser.add_argument('--count', '-n', type=int, default=1, help='Number of values')
        sample_parser.add_argument('--seed', '-s', type=int, help='Random seed for reproducibility')
        sample_parser.add_argument('--timezone', '-z', default='UTC', help='IANA zone used for now')
        sample_parser.add_argument('--locale', '-l', default=get_default_config().generation.locale,
                                   help='Faker locale backing the random source')

        # Generate command
        generate_parser = subparsers.add_parser('generate', help='Generate a table of temporal columns')
        generate_parser.add_argument('output', help='Output file (.csv, .json, .parquet)')
        generate_parser.add_argument('--rows', '-n', type=int, help='Number of rows to generate')
        generate_parser.add_argument('--seed', '-s', type=int, help='Random seed for reproducibility')
        generate_parser.add_argument('--preset', '-p', help='Configuration preset')
        generate_parser.add_argument('--config', '-c', help='Custom configuration file')

        # Config command
        config_parser = subparsers.add_parser('config', help='Manage configurations')
        config_subparsers = config_parser.add_subparsers(dest='config_command')

        config_subparsers.add_parser('list', help='List available presets')

        show_parser = config_subparsers.add_parser('show', help='Show preset configuration')
        show_parser.add_argument('preset', help='Preset name')

        create_parser = config_subparsers.add_parser('create', help='Create custom configuration')
        create_parser.add_argument('output', help='Output configuration file')

        return parser

    def run(self, args=None):
        """Run CLI"""
        args = self.parser.parse_args(args)

        log_level = logging.DEBUG if args.verbose else logging.WARNING
        setup_logging(level=log_level, log_file=args.log_file)

        if args.command == 'sample':
            self.cmd_sample(args)
        elif args.command == 'generate':
            self.cmd_generate(args)
        elif args.command == 'config':
            self.cmd_config(args)
        else:
            self.parser.print_help()

    def _fail(self, args, e: Exception):
        console.print(f"[bold red]✗ Error:[/bold red] {escape(str(e))}")
        if args.verbose:
            console.print_exception()
        sys.exit(1)

    def _sample_config(self, args) -> Config:
        config = get_default_config()
        config.temporal.timezone = args.timezone
        config.generation.locale = args.locale
        config.generation.seed = args.seed

        is_valid, errors = ConfigValidator.validate(config)
        if not is_valid:
            raise ValueError("Invalid configuration: " + "; ".join(errors))

        return config

    def cmd_sample(self, args):
        """Print random temporal values"""
        try:
            config = self._sample_config(args)
            fake = build_faker(config, clock=self.clock)
            defaults = config.temporal
            reference = pd.Timestamp(args.reference).to_pydatetime() if args.reference else None

            for _ in range(args.count):
                if args.kind == 'past':
                    value = fake.local_past(args.days if args.days is not None else defaults.past_days, reference)
                elif args.kind == 'future':
                    value = fake.local_future(args.days if args.days is not None else defaults.future_days, reference)
                elif args.kind == 'soon':
                    value = fake.local_soon(args.days if args.days is not None else defaults.soon_days)
                elif args.kind == 'recent':
                    value = fake.local_recent(args.days if args.days is not None else defaults.recent_days)
                elif args.kind == 'between':
                    if not args.start or not args.end:
                        raise ValueError("between needs --start and --end")
                    value = fake.local_between(
                        pd.Timestamp(args.start).to_pydatetime(),
                        pd.Timestamp(args.end).to_pydatetime(),
                    )
                else:
                    value = fake.random_duration(timedelta(days=args.max_days))

                console.print(value.isoformat() if args.kind != 'duration' else str(value))

        except Exception as e:
            self._fail(args, e)

    def _load_config(self, args) -> Config:
        config = get_default_config()

        if args.preset:
            config = self.config_loader.merge_configs(config, args.preset)
        if args.config:
            config = config.merge(self.config_loader.load_from_file(args.config))

        if args.rows:
            config.generation.num_rows = args.rows
        if args.seed is not None:
            config.generation.seed = args.seed

        return config

    def cmd_generate(self, args):
        """Write a table of temporal columns"""
        console.print(Panel.fit(
            "🕒 [bold]Temporal Data Generation[/bold]",
            border_style="blue"
        ))

        try:
            config = self._load_config(args)

            if not config.column_configs:
                raise ValueError("No columns configured; use --preset or --config")

            is_valid, errors = ConfigValidator.validate(config)
            if not is_valid:
                raise ValueError("Invalid configuration: " + "; ".join(errors))

            generator = TemporalGenerator(config, clock=self.clock)
            data = generator.generate()

            report = generator.validate(data)
            for warning in report["warnings"]:
                console.print(f"[yellow]⚠ {warning}[/yellow]")
            if not report["valid"]:
                raise ValueError("Generated data failed validation: " + "; ".join(report["errors"]))

            write_data(data, args.output)

            table = Table(title="Generated Columns", show_header=True)
            table.add_column("Column", style="cyan")
            table.add_column("Kind", style="white")
            table.add_column("First value", style="green")
            for col, recipe in config.column_configs.items():
                first = str(data[col].iloc[0]) if len(data) else ""
                table.add_row(col, recipe.get('kind', ''), first)
            console.print(table)

            console.print(f"✓ Wrote {len(data)} rows to {args.output}")

        except Exception as e:
            self._fail(args, e)

    def cmd_config(self, args):
        """Manage configurations"""
        try:
            if args.config_command == 'list':
                table = Table(title="Available Presets", show_header=True)
                table.add_column("Preset", style="cyan")
                table.add_column("Columns", style="white")

                for preset in self.config_loader.list_presets():
                    config = self.config_loader.load_preset(preset)
                    table.add_row(preset, ", ".join(config.column_configs))

                console.print(table)

            elif args.config_command == 'show':
                config = self.config_loader.load_preset(args.preset)

                console.print(f"\n[bold]Preset: {args.preset}[/bold]\n")
                console.print_json(data=config.to_dict())

            elif args.config_command == 'create':
                if 'default' in self.config_loader.presets:
                    config = self.config_loader.load_preset('default')
                else:
                    config = get_default_config()
                self.config_loader.save_config(config, args.output)

                console.print(f"✓ Created configuration file: {args.output}")
                console.print("  Edit this file to customize settings")

            else:
                console.print("Use 'config list', 'config show <preset>', or 'config create <file>'")

        except Exception as e:
            self._fail(args, e)


def main():
    """CLI entry point"""
    cli = CLI()
    cli.run()


if __name__ == "__main__":
    main()
