"""
utils/common.py

Common utility functions and global configuration management.
- Loads YAML/JSON config files that override the defaults in config.py
- Provides argument parsing for the command line entry point
- Miscellaneous helpers for file handling
"""

import json
import yaml
import argparse
import os

import config


class Config:
    def __init__(self, config_path=None):
        self.config = {}
        if config_path:
            self.load(config_path)

    def load(self, config_path):
        """
        Load configuration from YAML or JSON file.
        """
        if config_path.endswith('.yaml') or config_path.endswith('.yml'):
            with open(config_path, 'r', encoding='utf-8') as f:
                self.config = yaml.safe_load(f) or {}
        elif config_path.endswith('.json'):
            with open(config_path, 'r', encoding='utf-8') as f:
                self.config = json.load(f)
        else:
            raise ValueError('Unsupported config file type!')
        return self.config

    def get(self, key, default=None):
        return self.config.get(key, default)


def add_pipeline_args(parser):
    """
    Add common pipeline arguments for command line usage.
    :param parser: argparse.ArgumentParser
    """
    parser.add_argument('input', type=str,
                        help='Path of the text document to summarize')
    parser.add_argument('--sentences', type=int, default=None,
                        help=f'Number of sentences per summary (default: {config.DEFAULT_SENTENCES_COUNT})')
    parser.add_argument('--methods', type=str, nargs='+', default=None,
                        choices=['textrank', 'lexrank', 'frequency', 'bart'],
                        help='Summarization methods to run')
    parser.add_argument('--no-abstractive', action='store_true',
                        help='Skip the BART method (no network access)')
    parser.add_argument('--segmenter', type=str, default=None, choices=['regex', 'punkt'],
                        help='Sentence segmenter (punkt changes results, see README)')
    parser.add_argument('--parallel', action='store_true',
                        help='Run methods in parallel threads')
    parser.add_argument('--outdir', type=str, default=None,
                        help=f'Output directory (default: {config.DEFAULT_OUTPUT_DIR})')
    parser.add_argument('--plot', action='store_true',
                        help='Save a quality metrics comparison chart')
    parser.add_argument('--config', type=str, default=None,
                        help='Optional config YAML/JSON for all params')
    return parser


def read_text_file(filepath):
    """Read a document as-is; no format parsing."""
    with open(filepath, 'r', encoding='utf-8') as f:
        return f.read()


def ensure_dir(path):
    """Create directory if it does not exist."""
    os.makedirs(path, exist_ok=True)


def save_json(obj, filepath):
    """Save object as JSON file."""
    directory = os.path.dirname(filepath)
    if directory:
        ensure_dir(directory)
    with open(filepath, 'w', encoding='utf-8') as f:
        json.dump(obj, f, indent=2, ensure_ascii=False)
