"""Adds the SCORM 1.2 runtime shim to an HTML page.

The shim is plain ES5 so it runs in whatever browser the LMS hands the learner.
It finds the LMS ``API`` object (own window, parent chain, top, opener),
initializes once, marks a fresh attempt ``incomplete`` and, when asked,
marks it ``completed`` and finishes the session exactly once. Every call into
the LMS is wrapped so a broken host never breaks the hosted page.

Hosted content finishes the attempt with ``window.ScormRuntime.complete()``,
or sets ``window.SCORM_AUTO_COMPLETE = true`` to have it done on page exit.
"""

from string import Template

from . import config

BODY_CLOSE = "</body>"

_RUNTIME_TEMPLATE = Template("""
<script type="text/javascript" $marker>
(function () {
  "use strict";
  var MAX_PARENT_HOPS = $max_hops;
  var RETRY_INTERVAL_MS = $retry_interval;
  var RETRY_MAX_ATTEMPTS = $retry_attempts;

  var UNINITIALIZED = "uninitialized";
  var INITIALIZED = "initialized";
  var FINISHED = "finished";

  var state = UNINITIALIZED;
  var api = null;
  var attempts = 0;
  var retryTimer = null;

  function log(message) {
    try {
      if (window.console && window.console.log) {
        window.console.log("SCORM: " + message);
      }
    } catch (e) {}
  }

  function apiOn(win) {
    try {
      if (win && win.API && typeof win.API.LMSInitialize === "function") {
        return win.API;
      }
    } catch (e) {}
    return null;
  }

  function searchParents(win) {
    var found = apiOn(win);
    var hops = 0;
    try {
      while (!found && win && win.parent && win.parent !== win && hops < MAX_PARENT_HOPS) {
        hops++;
        win = win.parent;
        found = apiOn(win);
      }
    } catch (e) {}
    return found;
  }

  function discover() {
    var found = searchParents(window);
    if (!found) {
      try {
        found = apiOn(window.top);
      } catch (e) {}
    }
    if (!found) {
      try {
        if (window.opener) {
          found = searchParents(window.opener);
        }
      } catch (e) {}
    }
    return found;
  }

  function call(method) {
    var args = Array.prototype.slice.call(arguments, 1);
    try {
      return api[method].apply(api, args);
    } catch (e) {
      log(method + " failed: " + e);
      return null;
    }
  }

  function succeeded(result) {
    return result === true || String(result) === "true";
  }

  function tryInitialize() {
    if (state !== UNINITIALIZED) {
      return true;
    }
    attempts++;
    api = api || discover();
    if (!api || !succeeded(call("LMSInitialize", ""))) {
      return false;
    }
    state = INITIALIZED;
    var status = call("LMSGetValue", "cmi.core.lesson_status");
    if (status === "" || status === "not attempted") {
      call("LMSSetValue", "cmi.core.lesson_status", "incomplete");
      call("LMSCommit", "");
    }
    log("initialized");
    return true;
  }

  function stopRetrying() {
    if (retryTimer !== null) {
      window.clearInterval(retryTimer);
      retryTimer = null;
    }
  }

  function start() {
    if (tryInitialize()) {
      return;
    }
    retryTimer = window.setInterval(function () {
      if (tryInitialize()) {
        stopRetrying();
      } else if (attempts >= RETRY_MAX_ATTEMPTS) {
        stopRetrying();
        log("no LMS API found, running without tracking");
      }
    }, RETRY_INTERVAL_MS);
  }

  function complete() {
    if (state !== INITIALIZED) {
      return false;
    }
    state = FINISHED;
    call("LMSSetValue", "cmi.core.lesson_status", "completed");
    call("LMSCommit", "");
    call("LMSFinish", "");
    log("completed");
    return true;
  }

  function onLeave() {
    if (window.SCORM_AUTO_COMPLETE === true) {
      complete();
    }
  }

  window.ScormRuntime = {
    complete: complete,
    status: function () {
      return state;
    }
  };

  window.addEventListener("pagehide", onLeave);
  window.addEventListener("beforeunload", onLeave);

  if (document.readyState === "loading") {
    document.addEventListener("DOMContentLoaded", start);
  } else {
    start();
  }
})();
</script>
""")

RUNTIME_SCRIPT = _RUNTIME_TEMPLATE.substitute(
    marker=config.RUNTIME_MARKER,
    max_hops=config.API_MAX_PARENT_HOPS,
    retry_interval=config.API_RETRY_INTERVAL_MS,
    retry_attempts=config.API_RETRY_MAX_ATTEMPTS,
)


def runtime_script() -> str:
    return RUNTIME_SCRIPT


def inject(html: str) -> str:
    """Insert the runtime before the first ``</body>``, or append it."""
    index = html.find(BODY_CLOSE)
    if index == -1:
        return html + RUNTIME_SCRIPT
    return html[:index] + RUNTIME_SCRIPT + html[index:]
