"""
Text sent to the agent and shown to the human.

Every message to the agent ends with INSTRUCTIONS so the two commands stay
in view on each turn.
"""
from __future__ import annotations

from typing import Sequence

INSTRUCTIONS = (
    'You can respond with "SCHEMA <table_name>" to show the schema of a table. '
    'You can respond with "QUERY <query>" to execute the provided query and finish the exchange. '
    "Only respond with those predefined commands. "
    "Read the schema of any tables you want to use first. "
    "Always include the file extension in the table names, so table.json or table.csv, "
    "and then always alias the table with a custom name. "
    "Only send one command per message."
)

SYSTEM_PROMPT = (
    "You are a system that parses natural language data processing queries "
    "and constructs a SQL query to answer the question. "
    "You can only use pre-specified commands. "
    "You may not use natural language in your responses.\n" + INSTRUCTIONS
)

QUESTION_TEMPLATE = """User question: {question}

Respond with "SCHEMA <table_name>" to show the schema of a table. Respond with "QUERY <query>" to execute the provided query and finish the exchange. The user will respond to these commands.

Example commands:
"SCHEMA hello.json"
"SCHEMA papayas.csv"
"QUERY SELECT SUM(i) FROM numbers.json as numbers GROUP BY true"
"QUERY SELECT papaya_trees.region, AVG(papayas.size) FROM papaya_trees.json as papaya_trees JOIN papayas.csv as papayas ON papaya_tree_id = papaya_trees.id GROUP BY papaya_trees.region"

Never guess the schema of a table. Always ask for it. Only use the above commands, never respond with natural language. Do not end your commands with a period. You can use json and csv files.

Never respond with natural language.

Available tables: {tables}

{instructions}"""

# Human-facing text
QUESTION_PROMPT = "What would you like to compute?"
CHECKPOINT_PROMPT = "\nIs this satisfactory? If yes, please exit (or type 'exit'). If no, please specify the issue."
ACCEPT_WORD = "exit"


def question_message(question: str, tables: Sequence[str]) -> str:
    return QUESTION_TEMPLATE.format(
        question=question,
        tables=", ".join(tables),
        instructions=INSTRUCTIONS,
    )


def schema_message(serialized_columns: str) -> str:
    return serialized_columns + "\n" + INSTRUCTIONS


def retry_message(error_text: str) -> str:
    return error_text + "\n" + "Please retry." + "\n" + INSTRUCTIONS


def correction_message(constraint: str) -> str:
    return (
        "Please retry with this additional constraint: " + constraint
        + "\n" + INSTRUCTIONS
        + "\n" + "Do not apologize."
    )
