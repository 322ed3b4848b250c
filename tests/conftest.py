"""Shared fixtures: small on-disk projects and a clean warning switch."""

from pathlib import Path
from typing import Callable, Dict

import pytest

from scanner.diagnostics import set_warnings_suppressed


SITE_FILES = {
    "src/pages/index.astro": """---
import Header from '../components/Header.astro';
import Footer from '../components/Footer.astro';
import Hero from '../components/Hero.astro';
---
<html>
  <body>
    <Header title="Home" />
    <Hero />
    <Footer />
  </body>
</html>
""",
    "src/pages/about.astro": """---
import Header from '@/components/Header.astro';
import Footer from '~/components/Footer.astro';
---
<Header title="About" />
<main>About us</main>
<Footer />
""",
    "src/components/Header.astro": """---
import { useState } from 'react';
interface Props { title: string }
const { title } = Astro.props;
---
<header>{title}</header>
""",
    "src/components/Footer.astro": """<footer>Footer</footer>
""",
    "src/components/Hero.astro": """---
import Image from './Hero/Image.astro';
---
<section><Image src="/hero.png" /></section>
""",
    "src/components/Hero/Image.astro": """---
const { src } = Astro.props;
---
<img src={src} />
""",
}


@pytest.fixture(autouse=True)
def reset_warnings():
    """Every test starts and ends with warnings enabled."""
    set_warnings_suppressed(False)
    yield
    set_warnings_suppressed(False)


@pytest.fixture
def make_project(tmp_path) -> Callable[[Dict[str, str]], Path]:
    """Return a function that writes a {relative path: content} mapping under tmp_path."""

    def _make(files: Dict[str, str]) -> Path:
        root = tmp_path / "project"
        for rel_path, content in files.items():
            path = root / rel_path
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return root.resolve()

    return _make


@pytest.fixture
def site(make_project) -> Path:
    """A site with a home page (Header, Footer, Hero -> Image) and an about page."""
    return make_project(SITE_FILES)
