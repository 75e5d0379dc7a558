def handle(post_id, slug):
    return f"Blog post #{post_id} ({slug})"
