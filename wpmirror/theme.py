"""Fixed stylesheet written to ``style.css`` in the generated site."""

CSS = """*, *::before, *::after {
  box-sizing: border-box;
  margin: 0;
  padding: 0;
}

:root {
  --color-bg: #fdfbf7;
  --color-text: #2d2d2d;
  --color-text-secondary: #6b6b6b;
  --color-accent: #c4836a;
  --color-accent-soft: #e8d5ce;
  --color-lavender: #9b8fad;
  --color-border: #e8e4df;
}

html {
  background-color: var(--color-bg);
}

body {
  font-family: 'DM Sans', -apple-system, BlinkMacSystemFont, sans-serif;
  font-size: 16px;
  line-height: 1.6;
  color: var(--color-text);
  background: var(--color-bg);
}

a {
  color: var(--color-accent);
  text-decoration: none;
  transition: color 0.2s ease;
}

a:hover {
  color: var(--color-lavender);
}

.site-header {
  position: sticky;
  top: 0;
  z-index: 100;
  background: var(--color-bg);
  border-bottom: 1px solid var(--color-border);
  padding: 16px 24px;
  display: flex;
  justify-content: space-between;
  align-items: center;
}

.site-title {
  font-family: 'Playfair Display', Georgia, serif;
  font-size: 20px;
  font-weight: 600;
  letter-spacing: -0.02em;
}

.site-title a { color: var(--color-text); }
.site-title a:hover { color: var(--color-accent); }

.site-nav { font-size: 14px; }
.site-nav a { color: var(--color-text-secondary); margin-left: 24px; }
.site-nav a:hover { color: var(--color-accent); }

.main-content {
  max-width: 640px;
  margin: 0 auto;
  padding: 60px 24px 80px;
}

.post { margin-bottom: 60px; }
.entry-header { margin-bottom: 40px; }

.entry-title {
  font-family: 'Playfair Display', Georgia, serif;
  font-size: 42px;
  font-weight: 400;
  line-height: 1.2;
  color: var(--color-text);
  margin-bottom: 16px;
  letter-spacing: -0.02em;
}

.entry-meta {
  font-size: 13px;
  text-transform: uppercase;
  letter-spacing: 0.1em;
  color: var(--color-text-secondary);
}

.entry-content {
  font-family: 'Playfair Display', Georgia, serif;
  font-size: 19px;
  line-height: 1.85;
  color: var(--color-text);
}

.entry-content p { margin-bottom: 28px; }
.entry-content em { font-style: italic; color: var(--color-text-secondary); }
.entry-content strong { font-weight: 600; }

.entry-content img {
  width: 100%;
  height: auto;
  display: block;
  margin: 40px 0;
  border-radius: 4px;
}

.entry-content figure { margin: 40px 0; }
.entry-content figure img { margin: 0; }

.entry-content figcaption {
  text-align: center;
  font-family: 'DM Sans', sans-serif;
  font-size: 13px;
  color: var(--color-text-secondary);
  margin-top: 10px;
  font-style: italic;
}

.entry-content blockquote {
  border-left: 3px solid var(--color-accent-soft);
  padding-left: 20px;
  margin: 30px 0;
  font-style: italic;
  color: var(--color-text-secondary);
}

.entry-content ul, .entry-content ol { margin: 0 0 28px 24px; }
.entry-content li { margin-bottom: 8px; }

.divider {
  text-align: center;
  margin: 50px 0;
  color: var(--color-accent-soft);
  font-size: 24px;
  letter-spacing: 8px;
}

.author-section {
  border-top: 1px solid var(--color-border);
  padding-top: 40px;
  margin-top: 50px;
  display: flex;
  align-items: flex-start;
  gap: 20px;
}

.author-section img {
  width: 64px;
  height: 64px;
  border-radius: 50%;
  object-fit: cover;
  filter: grayscale(20%);
}

.author-info h4 {
  font-family: 'Playfair Display', Georgia, serif;
  font-size: 16px;
  font-weight: 600;
  margin-bottom: 6px;
}

.author-info p {
  font-size: 14px;
  line-height: 1.6;
  color: var(--color-text-secondary);
}

.post-navigation {
  display: grid;
  grid-template-columns: 1fr 1fr;
  gap: 20px;
  margin-top: 50px;
  padding-top: 30px;
  border-top: 1px solid var(--color-border);
}

.nav-link { display: block; }
.nav-link.next { text-align: right; }

.nav-label {
  font-size: 11px;
  text-transform: uppercase;
  letter-spacing: 0.1em;
  color: var(--color-text-secondary);
  margin-bottom: 4px;
}

.nav-title {
  font-family: 'Playfair Display', Georgia, serif;
  font-size: 16px;
  color: var(--color-text);
  transition: color 0.2s ease;
}

.nav-link:hover .nav-title { color: var(--color-accent); }

.comments-section {
  margin-top: 60px;
  padding-top: 40px;
  border-top: 1px solid var(--color-border);
}

.comments-title {
  font-family: 'Playfair Display', Georgia, serif;
  font-size: 18px;
  font-weight: 400;
  margin-bottom: 24px;
  color: var(--color-text-secondary);
}

.comment {
  padding: 20px 0;
  border-bottom: 1px solid var(--color-border);
}

.comment:last-child { border-bottom: none; }

.comment-author {
  font-weight: 500;
  color: var(--color-text);
  font-size: 14px;
}

.comment-content {
  margin-top: 8px;
  font-size: 15px;
  color: var(--color-text-secondary);
  line-height: 1.6;
}

.site-footer {
  border-top: 1px solid var(--color-border);
  padding: 40px 24px;
  text-align: center;
  margin-top: 40px;
}

.footer-title {
  font-family: 'Playfair Display', Georgia, serif;
  font-size: 18px;
  font-weight: 400;
  color: var(--color-text);
  margin-bottom: 8px;
}

.footer-tagline {
  font-size: 13px;
  color: var(--color-text-secondary);
  font-style: italic;
}

.page-header { text-align: center; margin-bottom: 60px; }

.page-header .home-title {
  font-family: 'Playfair Display', Georgia, serif;
  font-size: 52px;
  font-weight: 400;
  color: var(--color-text);
  margin-bottom: 12px;
  letter-spacing: -0.02em;
}

.page-header .home-tagline {
  font-size: 16px;
  color: var(--color-text-secondary);
  font-style: italic;
  margin-bottom: 20px;
}

.page-header .home-author {
  display: flex;
  align-items: center;
  justify-content: center;
  gap: 12px;
  margin-top: 24px;
}

.page-header .home-author img {
  width: 48px;
  height: 48px;
  border-radius: 50%;
  object-fit: cover;
  filter: grayscale(20%);
}

.page-header .home-author span {
  font-size: 15px;
  color: var(--color-text-secondary);
}

.post-list { list-style: none; padding: 0; }

.post-list-item {
  border-bottom: 1px solid var(--color-border);
  padding: 28px 0;
}

.post-list-item:first-child { border-top: 1px solid var(--color-border); }
.post-list-item a { display: block; color: inherit; }
.post-list-item a:hover .post-list-title { color: var(--color-accent); }

.post-list-date {
  font-size: 12px;
  text-transform: uppercase;
  letter-spacing: 0.1em;
  color: var(--color-text-secondary);
  margin-bottom: 6px;
}

.post-list-title {
  font-family: 'Playfair Display', Georgia, serif;
  font-size: 24px;
  font-weight: 400;
  line-height: 1.3;
  color: var(--color-text);
  margin-bottom: 8px;
  transition: color 0.2s ease;
  letter-spacing: -0.01em;
}

.post-list-excerpt {
  font-size: 15px;
  line-height: 1.6;
  color: var(--color-text-secondary);
}

@media (max-width: 600px) {
  .site-header { flex-direction: column; gap: 10px; text-align: center; }
  .site-nav a { margin: 0 12px; }
  .main-content { padding: 40px 20px 60px; }
  .entry-title { font-size: 32px; }
  .entry-content { font-size: 17px; }
  .post-navigation { grid-template-columns: 1fr; }
  .nav-link.next { text-align: left; }
  .author-section { flex-direction: column; align-items: center; text-align: center; }
  .page-header .home-title { font-size: 36px; }
  .post-list-title { font-size: 20px; }
}

"""
