def handle(user_id):
    return f"Admin view of user {user_id}"
