"""Routing — ordered route table with redirect-chain resolution.

Routes and global redirect rules are registered during setup; every
navigation intent is then normalized, matched, and followed through
its redirects until the result settles.
"""
