import sys

from llm_sfn.runner import main

from .app import handler

sys.exit(main(handler.build()))
