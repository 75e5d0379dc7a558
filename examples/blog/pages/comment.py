def handle(post_id):
    return f"Comment saved on post #{post_id}"
