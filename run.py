import argparse
import logging
import sys

import uvicorn

from wikicontext import config as env
from wikicontext.container import Container
from wikicontext.exceptions import NoValidResourcesError
from wikicontext.seeds import load_seed_file
from wikicontext.services.context_exporter import write_context_file
from wikicontext.services.prompt_builder import build_prompt

logger = logging.getLogger("wikicontext.run")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wikicontext", description="Collect wiki space context for an LLM.")
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="run the HTTP API")
    serve.add_argument("--host", default="0.0.0.0")
    serve.add_argument("--port", type=int, default=8000)

    collect = sub.add_parser("collect", help="crawl seed URLs and write the context file")
    collect.add_argument("seed_urls", nargs="*", help="wiki page URLs to start from")
    collect.add_argument("--seeds-file", help="YAML file with seed URLs")
    collect.add_argument("--output-dir", default=".", help="directory for wiki_context_<date>.txt")
    collect.add_argument("--question", help="also print an LLM prompt for this question")
    return parser


def _collect(args, container: Container) -> int:
    seeds = list(args.seed_urls)
    if args.seeds_file:
        seeds.extend(load_seed_file(args.seeds_file))

    controller = container.crawl_controller()
    try:
        document = controller.collect_context(seeds)
    except NoValidResourcesError as e:
        logger.error("%s", e)
        return 2

    path = write_context_file(document, args.output_dir)
    print(f"Total pages processed: {document.pages_processed}")
    print(f"Total spaces: {document.spaces_processed}")
    print(f"Context size: {document.size_kb} KB")
    print(f"Context file: {path}")
    if args.question:
        print()
        print(build_prompt(args.question, document))
    return 0


def main(argv=None, container: Container = None) -> int:
    logging.basicConfig(
        level=env.log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    args = _build_parser().parse_args(argv)
    container = container or Container()

    if args.command == "serve":
        from wikicontext.api.server import create_app

        uvicorn.run(create_app(container), host=args.host, port=args.port)
        return 0
    return _collect(args, container)


if __name__ == '__main__':
    sys.exit(main())
