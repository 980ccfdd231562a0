#!/usr/bin/env python3
from setuptools import setup
import subprocess
import os


def git_version():
    try:
        return subprocess.run(['git', 'describe', '--tags'], stdout=subprocess.PIPE,
                              stderr=subprocess.DEVNULL).stdout.decode().strip()
    except OSError:
        return None


ver = os.environ.get("PKGVER") or git_version() or "0.1.0"

reqs = []
with open('requirements.txt') as f:
    for l in f:
        l = l.strip()
        if not l:
            continue
        if l.find("=") != -1 and l.find("://") != -1:
            s = l.split("=", 1)
            reqs.append("{} @ {}".format(s[1], s[0]))
        else:
            reqs.append(l)

setup(
    name = 'recordings',
    packages = [
        'recordings',
        'recordings.types',
        ],
    version = ver,
    description = 'Album catalogue REST API',
    install_requires = reqs,
    extras_require = {
        'test': ['pytest'],
    },
    python_requires = '>=3.8',
    license = 'MIT',
)
