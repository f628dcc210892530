# docker_host_audit/__main__.py

from .cli import main

if __name__ == "__main__":
    main(prog_name="docker-host-audit")
