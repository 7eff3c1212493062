LISTING_HTML = """
<html><body>
<div class="header"><a href="/novel/site-banner-novel"><img src="/banner.png" alt="Banner"></a></div>
<div class="ul-list1">
  <div class="li-row">
    <div class="pic"><a href="/novel/martial-god-asura"><img src="/files/article/image/0/1.jpg" alt="Martial God Asura"></a></div>
    <div class="txt">
      <h3 class="tit"><a href="/novel/martial-god-asura" title="Martial God Asura">Martial God Asura</a></h3>
      <div class="desc">
        <div class="item"><div class="right"><a href="/author/Kindhearted-Bee">Kindhearted Bee</a></div></div>
        <div class="item"><div class="right"><a href="/genre/Action">Action</a>, <a href="/genre/Fantasy">Fantasy</a></div></div>
        <div class="item"><div class="right"><span class="s1">Ongoing</span></div></div>
        <div class="item"><div class="right"><a href="/novel/martial-god-asura/chapter-5000">Chapter 5000</a></div></div>
      </div>
    </div>
  </div>
  <div class="li-row">
    <div class="pic"><a href="/novel/the-beginning-after-the-end"><img src="/static/lazy.gif" data-src="https://cdn.example.com/tbate.jpg" alt="TBATE"></a></div>
    <div class="txt">
      <h3 class="tit"><a href="/novel/the-beginning-after-the-end">The Beginning After The End</a></h3>
      <div class="desc"><span class="s1">Completed</span><div class="score"><p class="vote">4.6</p></div></div>
    </div>
  </div>
  <div class="li-row">
    <div class="txt"><a href="https://ads.example.com/">Sponsored</a></div>
  </div>
  <div class="li-row">
    <div class="pic"><a href="/novel/lord-of-mysteries"><img src="/files/lotm.jpg" alt="Lord of the Mysteries"></a></div>
  </div>
</div>
</body></html>
"""

DUPLICATE_LISTING_HTML = """
<div class="ul-list1">
  <div class="li-row"><h3 class="tit"><a href="/novel/shadow-slave">Shadow Slave</a></h3></div>
  <div class="li-row"><h3 class="tit"><a href="/novel/shadow-slave">Shadow Slave (again)</a></h3></div>
  <div class="li-row"><h3 class="tit"><a href="/novel/reverend-insanity">Reverend Insanity</a></h3></div>
</div>
"""

DETAIL_HTML = """
<html><head>
<meta property="og:title" content="Martial God Asura - Free Web Novel">
<meta property="og:image" content="https://freewebnovel.com/files/og-cover.jpg">
<meta property="og:novel:status" content="OnGoing">
<meta property="og:novel:author" content="Kindhearted Bee">
</head><body>
<div class="m-book1">
  <h1 class="tit">Martial God Asura</h1>
  <div class="m-imgtxt">
    <div class="pic"><img src="/files/article/image/0/1.jpg" alt="Martial God Asura"></div>
    <div class="txt">
      <div class="item"><span title="Author"></span><div class="right"><a href="/author/Kindhearted-Bee" class="a1">Kindhearted Bee</a></div></div>
      <div class="item"><span title="Genre"></span><div class="right">
        <a href="/genre/Action">Action</a>, <a href="/genre/Adventure">Adventure</a>, <a href="/genre/Fantasy">Fantasy</a>,
        <a href="/genre/Harem">Harem</a>, <a href="/genre/Martial+Arts">Martial Arts</a>, <a href="/genre/Xianxia">Xianxia</a>,
        <a href="/genre/Action">Action</a>
      </div></div>
      <div class="item"><span title="Status"></span><div class="right"><a href="/sort/completed-novel">Completed</a></div></div>
    </div>
  </div>
  <div class="m-desc">
    <div class="score"><p class="vote">4.4 / 5 ( 1,234 votes)</p></div>
    <div class="txt"><div class="inner">
      <p>Chu Feng, an ordinary outer disciple, finds the power of the Asura inside him.</p>
      <p>His journey across the Nine Souls Galaxy begins.</p>
    </div></div>
  </div>
</div>
<div class="m-newest2">
  <ul class="ul-list5">
    <li><a href="/novel/martial-god-asura/chapter-1" title="Chapter 1 - Asura">Chapter 1 - Asura</a></li>
    <li><a href="/novel/martial-god-asura/chapter-2">Chapter 2: Ancient Sect</a></li>
    <li><a href="https://freewebnovel.com/novel/martial-god-asura/chapter-3">Chapter 3 &#8211; Chapter 3 Shadow</a></li>
    <li><a href="/novel/martial-god-asura/chapter-1">Chapter 1 - Duplicate</a></li>
    <li><a href="/novel/other-novel/chapter-1">Other novel</a></li>
    <li><a href="/novel/martial-god-asura/chapter-4">Chapter 4</a></li>
  </ul>
</div>
</body></html>
"""

META_ONLY_DETAIL_HTML = """
<html><head>
<meta property="og:title" content="Shadow Slave">
<meta property="og:image" content="/files/shadow-slave.jpg">
<meta property="og:novel:author" content="Guiltythree">
<meta property="og:novel:genre" content="Action, Drama, Fantasy">
<meta property="og:description" content="Growing up in poverty, Sunny never expected anything good from life.">
</head><body><p>Nothing structured here.</p></body></html>
"""

PARAGRAPH_ONE = "Chu Feng opened his eyes and saw the sect gate towering above the mist of the valley."
PARAGRAPH_TWO = "Second&nbsp;paragraph   with   extra spaces &amp; an entity that must survive cleaning."
SIDEBAR = "Sidebar paragraph that should never be included in the chapter output."

PRIMARY_CHAPTER_HTML = f"""
<html><body>
<div class="txt">
  <div id="article">
    <p>{PARAGRAPH_ONE}</p>
    <script>var ads = 1;</script>
    <!-- chapter body -->
    <p>Read the latest chapters at freewebnovel.com</p>
    <p>{PARAGRAPH_TWO}</p>
    <p>   </p>
  </div>
</div>
</body></html>
"""

SECONDARY_CHAPTER_HTML = f"""
<html><body>
<div class="sidebar"><p>{SIDEBAR}</p></div>
<div class="m-read">
  <div class="txt">
    <p>{PARAGRAPH_ONE}</p>
    <style>.x {{ color: red; }}</style>
    <p>Another paragraph in the secondary container that is long enough.</p>
  </div>
</div>
</body></html>
"""

SHORT_PRIMARY_CHAPTER_HTML = f"""
<html><body>
<div id="article"><p>Too short.</p></div>
<div class="txt"><p>{PARAGRAPH_ONE}</p></div>
</body></html>
"""

LINE_BREAK_CHAPTER_HTML = """
<html><body>
<div id="article">The first line of this chapter is long enough to keep.<br>Short<br>The third line of this chapter is kept as well.</div>
</body></html>
"""

MARKER_CHAPTER_HTML = f"""
<html><body>
<div class="top"><a href="/novel/martial-god-asura/chapter-1">Previous Chapter</a> <a href="/novel/martial-god-asura/chapter-3">Next Chapter</a></div>
<section>
  <p>{PARAGRAPH_ONE}</p>
  <p>Use arrow keys (or A / D) to PREV/NEXT chapter</p>
  <p>This paragraph sits after the first end marker and must be cut off.</p>
</section>
<div class="comment"><p>A reader comment that must not appear in the chapter body.</p></div>
</body></html>
"""

# "Add to Library" sits right after the start marker, closer than the end-marker gap.
CLOSE_END_MARKER_CHAPTER_HTML = (
    '<html><body><div class="top"><a href="/novel/martial-god-asura/chapter-1">Previous Chapter</a>'
    '<button>Add to Library</button></div>'
    f'<section><p>{PARAGRAPH_ONE}</p></section>'
    '<div class="comment"><p>A reader comment that must not appear in the chapter body.</p></div>'
    '</body></html>'
)

NO_MARKERS_CHAPTER_HTML = """
<html><body><div class="header">Welcome</div><p>Nothing to see.</p></body></html>
"""

TOO_SHORT_CHAPTER_HTML = """
<html><body><div id="article"><p>Tiny.</p></div></body></html>
"""
