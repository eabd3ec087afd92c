"""Static Content: fixed payloads for /, /html, /xml, /robots.txt, /deny, /image/*."""

import base64

HOME_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
    <title>httpbin-app</title>
</head>
<body>
    <h1>httpbin-app</h1>
    <p>HTTP request &amp; response fixture service.</p>
    <ul>
        <li><a href="/ip">/ip</a> origin IP</li>
        <li><a href="/user-agent">/user-agent</a> user agent</li>
        <li><a href="/headers">/headers</a> request headers</li>
        <li><a href="/get">/get</a> GET data</li>
        <li>/post POST data</li>
        <li><a href="/redirect/3">/redirect/:n</a> 302 redirect n times</li>
        <li><a href="/absolute-redirect/3">/absolute-redirect/:n</a> absolute 302 redirect n times</li>
        <li><a href="/redirect-to?url=/get">/redirect-to?url=foo</a> 302 redirect to foo</li>
        <li><a href="/status/418">/status/:code</a> returns the given status code</li>
        <li><a href="/bytes/1024">/bytes/:n</a> n random bytes, optional ?seed=</li>
        <li><a href="/delay/2">/delay/:n</a> delays the response</li>
        <li><a href="/stream/5">/stream/:n</a> streams n JSON lines</li>
        <li><a href="/drip?numbytes=5&amp;duration=5">/drip</a> drips bytes over a duration</li>
        <li><a href="/cookies">/cookies</a> returns cookies</li>
        <li><a href="/cookies/set?k1=v1">/cookies/set?name=value</a> sets cookies</li>
        <li><a href="/cookies/delete?k1">/cookies/delete?name</a> deletes cookies</li>
        <li><a href="/cache">/cache</a> 304 on conditional requests</li>
        <li><a href="/cache/60">/cache/:n</a> sets Cache-Control</li>
        <li><a href="/gzip">/gzip</a> gzip-encoded data</li>
        <li><a href="/deflate">/deflate</a> deflate-encoded data</li>
        <li><a href="/brotli">/brotli</a> brotli-encoded data</li>
        <li><a href="/basic-auth/user/passwd">/basic-auth/:user/:passwd</a> HTTP Basic Auth</li>
        <li><a href="/hidden-basic-auth/user/passwd">/hidden-basic-auth/:user/:passwd</a> 404'd Basic Auth</li>
        <li><a href="/html">/html</a> an HTML page</li>
        <li><a href="/xml">/xml</a> an XML document</li>
        <li><a href="/robots.txt">/robots.txt</a> robots rules</li>
        <li><a href="/deny">/deny</a> denied by robots.txt</li>
        <li><a href="/image/png">/image/png</a>, <a href="/image/jpeg">/image/jpeg</a>, <a href="/image/gif">/image/gif</a></li>
    </ul>
</body>
</html>
"""

MOBY_DICK_HTML = """<!DOCTYPE html>
<html>
  <head>
  </head>
  <body>
      <h1>Herman Melville - Moby-Dick</h1>

      <div>
        <p>
          Call me Ishmael. Some years ago - never mind how long precisely - having
          little or no money in my purse, and nothing particular to interest me on
          shore, I thought I would sail about a little and see the watery part of
          the world. It is a way I have of driving off the spleen and regulating the
          circulation. Whenever I find myself growing grim about the mouth; whenever
          it is a damp, drizzly November in my soul; whenever I find myself
          involuntarily pausing before coffin warehouses, and bringing up the rear
          of every funeral I meet; and especially whenever my hypos get such an upper
          hand of me, that it requires a strong moral principle to prevent me from
          deliberately stepping into the street, and methodically knocking people's
          hats off - then, I account it high time to get to sea as soon as I can.
        </p>
      </div>
  </body>
</html>
"""

SLIDESHOW_XML = """<?xml version='1.0' encoding='us-ascii'?>

<!--  A SAMPLE set of slides  -->

<slideshow
    title="Sample Slide Show"
    date="Date of publication"
    author="Yours Truly"
    >

    <!-- TITLE SLIDE -->
    <slide type="all">
      <title>Wake up to WonderWidgets!</title>
    </slide>

    <!-- OVERVIEW -->
    <slide type="all">
        <title>Overview</title>
        <item>Why <em>WonderWidgets</em> are great</item>
        <item/>
        <item>Who <em>buys</em> WonderWidgets</item>
    </slide>

</slideshow>
"""

ROBOTS_TXT = "User-agent: *\nDisallow: /deny\n"

DENY_TEXT = """
          .-''''''-.
        .' _      _ '.
       /   O      O   \\
      :                :
      |                |
      :       __       :
       \\  .-"'  '"-.  /
        '.          .'
          '-......-'
     YOU SHOULDN'T BE HERE
"""

# 1x1 pixel images
GIF_IMAGE = base64.b64decode(
    "R0lGODlhAQABAIAAAAAAAP///yH5BAEAAAAALAAAAAABAAEAAAIBRAA7"
)
PNG_IMAGE = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
)
JPEG_IMAGE = base64.b64decode(
    "/9j/4AAQSkZJRgABAQEAYABgAAD/2wBDAAEBAQEBAQEBAQEBAQEBAQEBAQEBAQEBAQEBAQEBAQEB"
    "AQEBAQEBAQEBAQEBAQEBAQEBAQEBAQEBAQEBAQEBAQH/2wBDAQEBAQEBAQEBAQEBAQEBAQEBAQEB"
    "AQEBAQEBAQEBAQEBAQEBAQEBAQEBAQEBAQEBAQEBAQEBAQEBAQEBAQEBAQH/wAARCAABAAEDASIA"
    "AhEBAxEB/8QAFQABAQAAAAAAAAAAAAAAAAAAAAr/xAAUEAEAAAAAAAAAAAAAAAAAAAAA/8QAFAEB"
    "AAAAAAAAAAAAAAAAAAAAAP/EABQRAQAAAAAAAAAAAAAAAAAAAAD/2gAMAwEAAhEDEQA/AL+AD//Z"
)

IMAGES = {
    "gif": (GIF_IMAGE, "image/gif"),
    "png": (PNG_IMAGE, "image/png"),
    "jpeg": (JPEG_IMAGE, "image/jpeg"),
}
