"""Kida template sources, one per view model.

Every template receives a single ``view`` variable. Region slots are
written as empty ``<div id="..." data-region></div>`` placeholders; the
document splices each region's own rendering into its slot.
"""

NAV = """\
<nav id="nav">{% for link in view.links %}<a href="#{{ link.href }}"{% if link.action %} data-action="{{ link.action }}"{% end %}>{{ link.label }}</a>{% end %}</nav>"""

MESSAGE = """\
{% if view.text %}<p class="message {{ view.kind }}">{{ view.text }}{% if view.link %} <a href="#{{ view.link.href }}">{{ view.link.label }}</a>{% end %}</p>{% end %}"""

NOTICE = """\
<div class="card notice {{ view.kind }}">
  <h2>{{ view.title }}</h2>
  <p class="error-message">{{ view.message }}</p>
  <a href="#{{ view.link.href }}" class="btn">{{ view.link.label }}</a>
</div>"""

HOME = """\
<div class="home-page">
  <header class="page-header">
    <h1>Lights, camera, action!</h1>
    <p>WatchClub helps you watch stuff together.</p>
  </header>
  {% if view.signed_in %}
  <section class="card">
    <h2>Create a Club</h2>
    <form data-action="create_club">
      <input name="name" placeholder="Club name (e.g., 2026 Movie Club)">
      <input name="start_date" type="date">
      <label>Picks per member (0 = unlimited) <input name="max_picks_per_member" type="number" value="1"></label>
      <label>A new pick every <input name="schedule_interval_quantity" type="number" value="1"></label>
      <select name="schedule_interval_unit">
        <option value="1">days</option>
        <option value="2" selected>weeks</option>
        <option value="3">months</option>
      </select>
      <button>Create Club</button>
    </form>
    <div id="create_club_error" data-region></div>
  </section>
  <section class="card">
    <h2>Join a Club</h2>
    <form data-action="join_club_by_code">
      <input name="code" placeholder="Club code">
      <button>Join Club</button>
    </form>
    <div id="join_club_error" data-region></div>
  </section>
  <section class="card">
    <h2>Your Clubs</h2>
    <div id="clubs" data-region></div>
  </section>
  {% else %}
  <section class="card">
    <h2>First, create your account</h2>
    <form data-action="create_account">
      <input name="name" placeholder="Your name">
      <input name="email" placeholder="Your email">
      <button>Create Account</button>
    </form>
    <p><a href="#/login" class="btn-link">Already have an account? Log in</a></p>
    <div id="user_error" data-region></div>
  </section>
  {% end %}
</div>"""

LOGIN = """\
<div class="login-page card">
  <h1>{{ view.heading }}</h1>
  <p>Enter your email address and we'll send you a link to log in.</p>
  <form data-action="send_login_email">
    <input name="email" placeholder="Your email">
    <button>Send Login Link</button>
  </form>
  <div id="login_result" data-region></div>
  <p><a href="#/" class="btn-link">Back to home</a></p>
</div>"""

LOGIN_LINK = """\
<div class="card">
  <h1>Logging you in...</h1>
  <div id="login_status" data-region></div>
</div>"""

PROFILE = """\
<div class="profile-page">
  <header class="page-header">
    <h1>{{ view.name }}</h1>
    <p>{{ view.email }}</p>
    <a href="#/" class="btn-secondary">+ Create New Club</a>
  </header>
  <section class="card">
    <h2>My Clubs</h2>
    <div id="clubs" data-region></div>
  </section>
  <button data-action="logout">Log out</button>
</div>"""

ABOUT = """\
<div class="about-page card">
  <h1>About WatchClub</h1>
  <p>Pick something to watch, invite your friends, and let the shuffle decide the schedule.</p>
  <p class="version">Version {{ view.version }}</p>
</div>"""

SHELL = """\
<div class="club-page" data-title="{{ view.title }}">
  {% if view.back %}<a href="#{{ view.back.href }}" class="btn-link">{{ view.back.label }}</a>{% end %}
  <div id="club_content" data-region></div>
  <div id="pick_content" data-region></div>
</div>"""

JOIN = """\
<div class="join-page card">
  <h1>Join Club</h1>
  <div id="club_info" data-region></div>
  <form data-action="join_club" data-club="{{ view.club_id }}">
    {% if view.needs_account %}
    <label>What's your name? <input name="name" placeholder="Enter your name"></label>
    <label>What's your email? <input name="email" placeholder="Enter your email"></label>
    {% else %}
    <p>Joining as <strong>{{ view.user_name }}</strong></p>
    {% end %}
    <button>Join Club</button>
  </form>
  <div id="join_error" data-region></div>
</div>"""

ADD_PICK = """\
<div class="add-pick-page card">
  <h1>Add A Pick</h1>
  <div id="quota" data-region></div>
  <form data-action="add_pick" data-club="{{ view.club_id }}">
    <label>Title * <input name="title" placeholder="e.g., The Shawshank Redemption"></label>
    <label>Year <input name="year" type="number" placeholder="e.g., 1994"></label>
    <label>Link <input name="link" placeholder="Optional link"></label>
    <label>Why did you pick this? <textarea name="notes" rows="3" placeholder="Optional notes..."></textarea></label>
    <button class="btn primary">Add Pick</button>
    <a href="#{{ view.cancel_href }}" class="btn-secondary">Cancel</a>
  </form>
  <div id="add_pick_error" data-region></div>
</div>"""

CLUB_LIST = """\
{% if view.items %}<div class="club-list">{% for item in view.items %}
  <a href="#{{ item.href }}" class="club-item"><strong>{{ item.name }}</strong> <span class="club-status {% if item.started %}started{% else %}pending{% end %}">{{ item.status_label }}</span></a>{% end %}
</div>{% else %}<p class="empty-state">{{ view.empty_text }}</p>{% end %}"""

CLUB_DETAIL = """\
<div class="club-detail">
  <header class="page-header">
    <h1>{{ view.name }}</h1>
    <div class="club-meta">
      <span>Start Date: {{ view.start_date_text }}</span>
      <span>{{ view.interval_text }}</span>
      <span class="club-status {{ view.state }}">{{ view.status_label }}</span>
    </div>
  </header>
  <section class="card">
    <h3>Invite Friends</h3>
    <p>Share this link with your friends:</p>
    <input type="text" value="{{ view.share_url }}" readonly>
  </section>
  <section class="card">
    <h3>Members ({{ view.members | length }})</h3>
    <div class="member-list">{% for member in view.members %}
      <div class="member-item"><span>{{ member.name }}</span> <span class="badge">{{ member.pick_count }} picked</span></div>{% end %}
    </div>
  </section>
  <section class="card">
    <h3>Picks ({{ view.picks | length }})</h3>
    <p>{{ view.quota_text }}</p>
    {% if view.can_add_pick %}<a href="#{{ view.add_pick_href }}" class="btn">Add A Pick</a>{% end %}
    <div class="pick-list">{% for pick in view.picks %}
      <div class="pick-item"><a href="#{{ pick.href }}"><strong>{{ pick.title }}</strong></a> {{ pick.year_text }}{% if pick.notes %}<p class="pick-notes">{{ pick.notes }}</p>{% end %}</div>{% end %}
    </div>
  </section>
  {% if view.can_start %}
  <section class="card">
    <h3>Ready to Start!</h3>
    <p>Click below to shuffle the picks and generate the schedule.</p>
    <button data-action="start_club" data-club="{{ view.club_id }}" class="btn primary">Start Club &amp; Shuffle</button>
    <div id="start_error" data-region></div>
  </section>
  {% end %}
  {% if view.started %}
  <section class="card">
    <h3>Schedule</h3>
    <div id="schedule" data-region></div>
    <button data-action="download_calendar" data-club="{{ view.club_id }}">Download Calendar</button>
    <div id="calendar_status" data-region></div>
  </section>
  {% end %}
  <button data-action="delete_club" data-club="{{ view.club_id }}" class="btn danger">Delete Club</button>
</div>"""

SCHEDULE = """\
<div class="schedule-list">{% for row in view.rows %}
  <div class="schedule-item">
    <div class="week-number">{{ row.label }}</div>
    <div class="schedule-details"><a href="#{{ row.href }}"><strong>{{ row.title }}</strong></a> {{ row.year_text }}
      <div class="schedule-date">{{ row.date_text }}</div>
    </div>
  </div>{% end %}
</div>"""

CLUB_INFO = """\
<div class="club-info">
  <h2>{{ view.name }}</h2>
  <p><strong>Start Date:</strong> {{ view.start_date_text }}</p>
  <p><strong>Members:</strong> {{ view.member_count }}</p>
  {% if view.already_member %}<p class="success-message">You're already a member. <a href="#{{ view.club_href }}">Go to club</a></p>{% end %}
</div>"""

QUOTA = """\
<p class="quota">{{ view.club_name }}: {{ view.text }}</p>"""

PICK_DETAIL = """\
<div class="pick-detail card">
  <h1>{{ view.pick.title }} {{ view.pick.year_text }}</h1>
  <p>Picked by {{ view.pick.owner_name }} for {{ view.club_name }}</p>
  {% if view.pick.link %}<p><a href="{{ view.pick.link }}" rel="noopener">{{ view.pick.link }}</a></p>{% end %}
  {% if view.pick.notes %}<p class="pick-notes">{{ view.pick.notes }}</p>{% end %}
  {% if view.can_delete %}<button data-action="delete_pick" data-club="{{ view.club_id }}" data-pick="{{ view.pick.id }}" class="btn danger">Delete Pick</button>{% end %}
  <a href="#{{ view.back_href }}" class="btn-secondary">Back to club</a>
</div>"""

TEMPLATES: dict[str, str] = {
    "nav.html": NAV,
    "message.html": MESSAGE,
    "notice.html": NOTICE,
    "home.html": HOME,
    "login.html": LOGIN,
    "login_link.html": LOGIN_LINK,
    "profile.html": PROFILE,
    "about.html": ABOUT,
    "shell.html": SHELL,
    "join.html": JOIN,
    "add_pick.html": ADD_PICK,
    "club_list.html": CLUB_LIST,
    "club_detail.html": CLUB_DETAIL,
    "schedule.html": SCHEDULE,
    "club_info.html": CLUB_INFO,
    "quota.html": QUOTA,
    "pick_detail.html": PICK_DETAIL,
}
