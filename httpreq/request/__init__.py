"""
Request pipeline.

build_request -> HttpExecutor.send -> print_response, wired by run_request.
"""
