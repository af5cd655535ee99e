"""build_resume_cli.py
Upload a resume file, extract it, optionally translate it and export it from the command line.
Example: `python build_resume_cli.py path/to/resume.pdf --language en --template SIDEBAR`
"""
import argparse
import asyncio
import sys

from resume_architect.config import BUILDER_DEFAULTS
from resume_architect.export.pdf_exporter import PDFExporter
from resume_architect.models import SUPPORTED_LANGUAGES, TemplateType
from resume_architect.session import ResumeBuilderSession


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Extract a resume with the LLM and export it with one of the templates."
    )
    parser.add_argument("file_path", help="Resume to upload (.pdf, .png, .jpg, .jpeg, .docx, .doc)")
    parser.add_argument(
        "--language",
        choices=SUPPORTED_LANGUAGES,
        default=BUILDER_DEFAULTS.DEFAULT_LANGUAGE,
        help="Language the resume is extracted in",
    )
    parser.add_argument(
        "--template",
        choices=[t.value for t in TemplateType],
        default=BUILDER_DEFAULTS.DEFAULT_TEMPLATE,
        help="Template to export with",
    )
    parser.add_argument(
        "--translate-to",
        choices=SUPPORTED_LANGUAGES,
        default=None,
        help="Translate the extracted resume before exporting",
    )
    parser.add_argument(
        "--output-dir",
        default=BUILDER_DEFAULTS.EXPORT_DIR,
        help="Folder the PDF (or print page) is written to",
    )
    return parser


async def run(args: argparse.Namespace) -> int:
    session = ResumeBuilderSession(
        exporter=PDFExporter(output_dir=args.output_dir),
        language=args.language,
    )
    session.select_template(args.template)

    await session.handle_upload(args.file_path)
    if session.error:
        print(f"Extraction failed: {session.error}")
        return 1

    if args.translate_to and args.translate_to != session.language:
        await session.toggle_language()
        if session.alert:
            print(f"Warning: {session.alert}")

    result = await session.export_pdf()

    # Print the results
    info = session.resume.personal_info
    print("Resume Extraction Result:")
    print(f"Name: {info.full_name}")
    print(f"Email: {info.email}")
    print(f"Experience entries: {len(session.resume.experience)}")
    print(f"Skills: {', '.join(s.name for s in session.resume.skills) if session.resume.skills else 'None'}")

    if result is None:
        print(f"Export failed: {session.alert}")
        return 1
    if result.method == "pdf":
        print(f"PDF written to: {result.path}")
    else:
        print(f"PDF export unavailable ({result.message}). Print page opened: {result.path}")
    return 0


def main():
    args = build_arg_parser().parse_args()
    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
