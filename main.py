import argparse
import logging
import os

from src.utils.db import init_db, save_workflow
from src.utils.doc_filler import read_document_text, save_completed_document
from src.workflows.dialogue import DialogueEngine
from src.workflows.workflow import WORKFLOW_TEMPLATES, download_name, final_text, load_document, start_workflow

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper(), format='%(asctime)s - %(levelname)s - %(message)s')


def print_new_turns(workflow, already_printed: int) -> int:
    for turn in workflow.conversation[already_printed:]:
        if turn.role == "assistant":
            print(f"\n{turn.text}")
    return len(workflow.conversation)


def run_dialogue(engine: DialogueEngine) -> bool:
    """Answers fields from stdin until the workflow completes. Returns False if the user quits."""
    printed = 0
    engine.start()
    printed = print_new_turns(engine.workflow, printed)
    while not engine.is_complete:
        try:
            answer = input("\n> ")
        except EOFError:
            return False
        if answer.strip().lower() in ("quit", "exit"):
            return False
        if answer.strip() == "" and engine.active_field is not None and engine.active_field.suggestion:
            engine.use_suggestion()
        else:
            engine.submit_answer(answer)
        printed = print_new_turns(engine.workflow, printed)
    return True


def main():
    parser = argparse.ArgumentParser(description="Complete the placeholder fields of a legal document through a guided dialogue.")
    parser.add_argument("--document", required=True, help="Path to the input DOCX or TXT document")
    parser.add_argument("--output", help="Path to save the completed document (default: <name>_completed.txt next to the input)")
    parser.add_argument("--template", default="custom-doc", choices=[t["id"] for t in WORKFLOW_TEMPLATES], help="Workflow template")
    parser.add_argument("--owner", help="Owner id stored with the workflow")
    parser.add_argument("--save", action="store_true", help="Save the workflow to the database")
    args = parser.parse_args()

    # --- Input Validation & DB Init ---
    if not os.path.exists(args.document):
        print(f"Error: Input document not found at {args.document}")
        return

    if args.save:
        init_db()

    # --- Processing Steps ---
    try:
        text = read_document_text(args.document)
    except ValueError as e:
        print(f"Error: {e}")
        return

    workflow = start_workflow(args.template, owner_id=args.owner)
    fields = load_document(workflow, text, file_name=os.path.basename(args.document))
    print(workflow.conversation[-1].text)
    if not fields:
        return

    print("\nPress Enter to accept a suggestion, or type 'quit' to stop.")
    engine = DialogueEngine(workflow, on_complete=save_workflow if args.save else None)
    finished = run_dialogue(engine)

    if not finished:
        if args.save:
            save_workflow(workflow)
            print(f"\nWorkflow {workflow.id} saved; it can be resumed from the web app.")
        return

    output_path = args.output or os.path.join(os.path.dirname(args.document), download_name(workflow))
    save_completed_document(final_text(workflow), output_path)
    print(f"\nCompleted document written to {output_path}")


if __name__ == "__main__":
    main()
