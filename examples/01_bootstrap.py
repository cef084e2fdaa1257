"""
Bootstrap - cached session or fresh authorization
"""
import logging
import sys

from b2fs import bootstrap_session, describe_failure, setup_logging, B2AuthError


def main():
    logging.basicConfig(level=logging.DEBUG)
    setup_logging(logging.DEBUG)
    
    # First run: authorizes with b2fs.yml and caches the session
    # Next runs: reuses <tmpdir>/b2fs_cache.txt
    try:
        session = bootstrap_session("b2fs.yml")
    except B2AuthError as e:
        print(describe_failure(e), file=sys.stderr)
        sys.exit(1)
    
    print(f"API URL: {session.api_base_url}")
    print(f"Download URL: {session.download_base_url}")


if __name__ == "__main__":
    main()
