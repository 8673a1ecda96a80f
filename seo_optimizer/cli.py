from __future__ import annotations
import argparse
import json
import logging
import sys
from pathlib import Path

from seo_optimizer.config import load_settings
from seo_optimizer.report import render_markdown, to_dict


def _emit_view(view, fmt: str) -> None:
    if fmt == "json":
        print(json.dumps(to_dict(view), ensure_ascii=False, indent=2))
    else:
        print(render_markdown(view))


def _read_text_arg(args) -> str:
    if getattr(args, "file", None):
        return Path(args.file).read_text(encoding="utf-8")
    if getattr(args, "text", None):
        return args.text
    return sys.stdin.read()


def _run_parse(args, settings) -> int:
    """Format a saved model response without calling the API."""
    from seo_optimizer.analysis import format_analysis

    view = format_analysis(_read_text_arg(args), settings.heading_registry())
    _emit_view(view, args.format)
    return 0


def _run_analyze(args, settings) -> int:
    from seo_optimizer.analyzer import AnalysisRequest, run_analysis
    from seo_optimizer.llm.client import LLMClient

    if args.url:
        request = AnalysisRequest(
            source="url",
            url=args.url,
            language=args.language,
            keyword=args.keyword,
            title=args.title or "",
        )
    else:
        request = AnalysisRequest(
            source="text",
            text=_read_text_arg(args),
            language=args.language,
            keyword=args.keyword,
            title=args.title or "",
        )

    outcome = run_analysis(request, LLMClient(settings.llm_config()), settings.heading_registry())
    if not outcome.success:
        print(f"Error: {outcome.error}", file=sys.stderr)
        return 1
    if args.raw_out:
        Path(args.raw_out).write_text(outcome.raw_text, encoding="utf-8")
    _emit_view(outcome.view, args.format)
    return 0


def _run_blog(args, settings) -> int:
    from seo_optimizer.blog import BlogRequest, DraftError, create_draft, generate_blog_post, suggest_title
    from seo_optimizer.llm.client import LLMClient

    outline = Path(args.outline_file).read_text(encoding="utf-8") if args.outline_file else ""
    request = BlogRequest(
        topic=args.topic,
        keywords=args.keywords,
        tone=args.tone,
        language=args.language,
        outline=outline,
    )
    result = generate_blog_post(request, LLMClient(settings.llm_config()))
    if not result.success:
        print(f"Error: {result.error}", file=sys.stderr)
        return 1

    print(result.data)
    if args.save_draft:
        from seo_optimizer.adapters.docx_adapter import emit_draft_docx

        try:
            draft = create_draft(
                title=args.title or suggest_title(request, result.data),
                content=result.data,
                language=args.language,
                keywords=args.keywords,
            )
        except DraftError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        out = args.save_draft
        if Path(out).suffix.lower() != ".docx":
            out = str(Path(settings.drafts_dir) / f"{Path(out).name}.docx")
        emit_draft_docx(draft, out)
        print(json.dumps({"draft": out, "title": draft.title, "tags": draft.tags}, ensure_ascii=False, indent=2), file=sys.stderr)
    return 0


def _run_chat(args, settings) -> int:
    from seo_optimizer.chatbot import GREETING, ChatSession
    from seo_optimizer.llm.client import LLMClient

    client = LLMClient(settings.llm_config())
    session = ChatSession(language=args.language)
    if args.message:
        reply = session.ask(client, args.message)
        print(reply.reply)
        return 0 if reply.success else 1

    print(GREETING)
    while True:
        try:
            message = input("> ")
        except EOFError:
            break
        if message.strip().lower() in ("exit", "quit"):
            break
        print(session.ask(client, message).reply)
    return 0


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(
        prog="seo-optimizer",
        description="AI SEO Optimizer: content analysis, blog drafts and an SEO chatbot"
    )
    ap.add_argument("--settings", default=None, help="Path to settings YAML (default: seo_optimizer.yml)")
    ap.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    sub = ap.add_subparsers(dest="command", required=True)

    # Shared output options
    out_opts = argparse.ArgumentParser(add_help=False)
    out_opts.add_argument("--format", default="markdown", choices=["markdown", "json"], help="Output format")

    p_parse = sub.add_parser("parse", parents=[out_opts], help="Format a saved model response (no API call)")
    p_parse.add_argument("file", nargs="?", help="Response text file (default: stdin)")

    p_analyze = sub.add_parser("analyze", parents=[out_opts], help="Analyze content for a target keyword")
    source = p_analyze.add_mutually_exclusive_group()
    source.add_argument("--url", help="Fetch content from a URL")
    source.add_argument("--file", help="Read content from a text file")
    source.add_argument("--text", help="Content text")
    p_analyze.add_argument("--keyword", required=True, help="Primary target keyword")
    p_analyze.add_argument("--title", help="Content title (overrides the fetched page title for --url)")
    p_analyze.add_argument("--language", default=None, choices=["en", "th"], help="Content language")
    p_analyze.add_argument("--raw-out", help="Also save the raw model response here")

    p_blog = sub.add_parser("blog", help="Generate a blog post")
    p_blog.add_argument("topic", help="Topic or title idea")
    p_blog.add_argument("--keywords", default="", help="Comma separated keywords (also used as draft tags)")
    p_blog.add_argument("--tone", default="professional", help="Tone of voice")
    p_blog.add_argument("--language", default=None, choices=["en", "th"], help="Post language")
    p_blog.add_argument("--outline-file", help="Outline or key points")
    p_blog.add_argument("--title", help="Draft title (default: first H2 or topic)")
    p_blog.add_argument("--save-draft", help="Save the post as a draft .docx (path or name)")

    p_chat = sub.add_parser("chat", help="Ask the SEO chatbot")
    p_chat.add_argument("message", nargs="?", help="Single question (default: interactive)")
    p_chat.add_argument("--language", default=None, choices=["en", "th"], help="Chat language")

    args = ap.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    settings = load_settings(args.settings)
    if getattr(args, "language", "unset") is None:
        args.language = settings.default_language

    if args.command != "parse" and not settings.api_key:
        ap.error(f"'{args.command}' requires an API key (ANTHROPIC_API_KEY env var or api_key in settings)")

    if args.command == "blog":
        from seo_optimizer.blog import TONES
        if args.tone not in TONES:
            ap.error(f"--tone must be one of: {', '.join(TONES)}")

    handlers = {
        "parse": _run_parse,
        "analyze": _run_analyze,
        "blog": _run_blog,
        "chat": _run_chat,
    }
    return handlers[args.command](args, settings)


if __name__ == "__main__":
    sys.exit(main())
