"""
CLI for the Polish realizer.
"""

import json

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from polish_realizer.framework.elements import InflectedWordElement
from polish_realizer.framework.features import LexicalCategory
from polish_realizer.framework.serialization import parse_category, parse_feature, tree_from_json
from polish_realizer.lexicon.lexicon import Lexicon
from polish_realizer.morphology.processor import MorphologyProcessor
from polish_realizer.morphology.rules import number_of_syllables
from polish_realizer.orthography.processor import OrthographyConfig
from polish_realizer.realiser.realiser import Realiser, RealiserConfig
from polish_realizer.utils.file_handlers import save_json, save_text
from polish_realizer.utils.logging_config import configure_logging

console = Console()


@click.group()
@click.option('--log-level', default='WARNING', help='Logging level (DEBUG, INFO, WARNING, ERROR)')
@click.option('--log-json', is_flag=True, help='Emit log lines as JSON')
@click.pass_context
def main(ctx, log_level, log_json):
    """Polish realizer - turn annotated element trees into Polish text."""
    ctx.ensure_object(dict)
    ctx.obj['log_json'] = log_json
    configure_logging(log_level, json_output=log_json)


@main.command()
@click.argument('tree_json', type=click.Path(exists=True, dir_okay=False))
@click.option('--lexicon', '-l', 'lexicon_path', type=click.Path(exists=True, dir_okay=False),
              default=None, help='Lexicon JSON file')
@click.option('--comma-premodifiers', is_flag=True, help='Separate premodifiers with commas')
@click.option('--comma-cue-phrase', is_flag=True, help='Put a comma after cue phrases')
@click.option('--debug', is_flag=True, help='Log the tree after every stage')
@click.option('--output', '-o', default=None, help='Write the result to this file')
@click.option('--json-output', '-j', is_flag=True, help='Output as JSON')
@click.pass_context
def realise(ctx, tree_json, lexicon_path, comma_premodifiers, comma_cue_phrase, debug, output, json_output):
    """Realise the element tree stored in TREE_JSON."""
    if debug:
        configure_logging('DEBUG', json_output=ctx.obj['log_json'])

    try:
        lexicon = Lexicon.from_json(lexicon_path) if lexicon_path else None
        tree = tree_from_json(tree_json, lexicon)
        config = RealiserConfig(
            debug=debug,
            orthography=OrthographyConfig(
                comma_sep_premodifiers=comma_premodifiers,
                comma_sep_cuephrase=comma_cue_phrase,
            ),
        )
        realised = Realiser(lexicon, config=config).realise(tree)
        text = realised.realisation if realised is not None and realised.realisation else ""
    except Exception as e:
        console.print(f"[red]Error realising tree:[/red] {escape(str(e))}")
        raise click.Abort()

    if json_output:
        result = {"input": tree_json, "text": text}
        if output:
            save_json(result, output)
        console.print(json.dumps(result, indent=2, ensure_ascii=False), markup=False)
    else:
        if output:
            save_text(text, output)
        console.print(text, markup=False, highlight=False)


@main.command()
@click.argument('base')
@click.argument('category')
@click.option('--lexicon', '-l', 'lexicon_path', required=True,
              type=click.Path(exists=True, dir_okay=False), help='Lexicon JSON file')
@click.option('--feature', '-f', 'features', multiple=True,
              help='Feature as NAME=VALUE, e.g. case=LOCATIVE (repeatable)')
def inflect(base, category, lexicon_path, features):
    """Inflect a single word BASE of lexical CATEGORY."""
    try:
        lexicon = Lexicon.from_json(lexicon_path)
        word_category = parse_category(category)
        if not isinstance(word_category, LexicalCategory):
            raise ValueError(f"'{category}' is not a lexical category")

        entry = lexicon.lookup(base, word_category)
        word = InflectedWordElement.from_word(entry) if entry else InflectedWordElement(base, word_category)
        for item in features:
            name, sep, value = item.partition('=')
            if not sep:
                raise ValueError(f"Feature '{item}' must be written as NAME=VALUE")
            feature, typed = parse_feature(name.strip(), value.strip())
            word.set_feature(feature, typed)

        realised = MorphologyProcessor(lexicon).realise_word(word)
    except Exception as e:
        console.print(f"[red]Error inflecting '{escape(base)}':[/red] {escape(str(e))}")
        raise click.Abort()

    console.print(realised.realisation, markup=False, highlight=False)


@main.command()
@click.argument('tree_json', type=click.Path(exists=True, dir_okay=False))
@click.option('--lexicon', '-l', 'lexicon_path', type=click.Path(exists=True, dir_okay=False),
              default=None, help='Lexicon JSON file')
def tree(tree_json, lexicon_path):
    """Print the element tree stored in TREE_JSON."""
    try:
        lexicon = Lexicon.from_json(lexicon_path) if lexicon_path else None
        root = tree_from_json(tree_json, lexicon)
    except Exception as e:
        console.print(f"[red]Error reading tree:[/red] {escape(str(e))}")
        raise click.Abort()

    console.print(root.print_tree(), markup=False, highlight=False)


@main.command()
@click.argument('words', nargs=-1, required=True)
def syllables(words):
    """Count the syllables of WORDS."""
    table = Table(title="Syllables")
    table.add_column("Word", style="cyan")
    table.add_column("Syllables", justify="right", style="green")

    for word in words:
        table.add_row(word, str(number_of_syllables(word)))

    console.print(table)


if __name__ == '__main__':
    main()
