"""Table definitions for the volunteer-management schema.

DDL is authored in the same SQLite surface syntax as the rest of the
application and translated once for the pool's dialect at startup; on MySQL every
``updated_at`` column also gains ON UPDATE CURRENT_TIMESTAMP. The tuple
is ordered so that every referenced table is created before its referrers.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class TableDefinition:
    """One CREATE TABLE IF NOT EXISTS statement and the table it creates."""

    name: str
    ddl: str


SETTINGS_TABLE = "organization_settings"

DEFAULT_ORGANIZATION_SETTINGS = {
    "org_name": "UYHO",
    "org_full_name": "United Young Help Organization",
    "org_description": (
        "United Young Help Organization (UYHO) is a youth-led nonprofit dedicated to "
        "empowering communities through volunteerism, education, and humanitarian aid."
    ),
    "contact_email": "contact@uyho.org",
    "website_url": "https://uyho.org",
}


TABLE_DEFINITIONS: Tuple[TableDefinition, ...] = (
    TableDefinition(
        "team_members",
        """
        CREATE TABLE IF NOT EXISTS team_members (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name VARCHAR(255) NOT NULL,
            position VARCHAR(255) NOT NULL,
            specialty VARCHAR(255),
            image_url TEXT,
            category VARCHAR(100),
            created_at DATETIME DEFAULT CURRENT_TIMESTAMP
        )
        """,
    ),
    TableDefinition(
        "volunteers",
        """
        CREATE TABLE IF NOT EXISTS volunteers (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            full_name VARCHAR(255) NOT NULL,
            email VARCHAR(255) UNIQUE NOT NULL,
            password VARCHAR(255) NOT NULL,
            phone VARCHAR(50),
            age INT,
            address TEXT,
            wing VARCHAR(255),
            avatar TEXT,
            education TEXT,
            position VARCHAR(100) DEFAULT 'Member',
            lives_impacted INT DEFAULT 0,
            teams_led INT DEFAULT 0,
            hours_given INT DEFAULT 0,
            respect_points INT DEFAULT 0,
            availability TEXT,
            digital_id VARCHAR(100) UNIQUE NOT NULL,
            total_hours INT DEFAULT 0,
            projects INT DEFAULT 0,
            points INT DEFAULT 0,
            status VARCHAR(50) DEFAULT 'Active',
            last_active DATETIME,
            total_donated REAL DEFAULT 0,
            total_collected REAL DEFAULT 0,
            donation_points INT DEFAULT 0,
            created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
            updated_at DATETIME DEFAULT CURRENT_TIMESTAMP
        )
        """,
    ),
    TableDefinition(
        "campaigns",
        """
        CREATE TABLE IF NOT EXISTS campaigns (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            title VARCHAR(255) NOT NULL,
            wing VARCHAR(255) NOT NULL,
            description TEXT NOT NULL,
            budget REAL DEFAULT 0,
            logistics REAL DEFAULT 0,
            equipment REAL DEFAULT 0,
            marketing REAL DEFAULT 0,
            image TEXT,
            location VARCHAR(255) DEFAULT 'TBD',
            volunteers_joined INT DEFAULT 0,
            volunteers_needed INT DEFAULT 10,
            raised REAL DEFAULT 0,
            goal REAL DEFAULT 0,
            days_left INT DEFAULT 30,
            urgency INT DEFAULT 0,
            status VARCHAR(50) DEFAULT 'Active',
            host_id INT,
            budget_breakdown TEXT,
            event_date VARCHAR(100),
            program_hours INT DEFAULT 0,
            program_respect INT DEFAULT 0,
            lives_impacted INT DEFAULT 0,
            approval_status VARCHAR(50) DEFAULT 'pending',
            decline_reason TEXT,
            reviewed_by INT,
            reviewed_at DATETIME,
            created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
            updated_at DATETIME DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY (host_id) REFERENCES volunteers(id) ON DELETE SET NULL
        )
        """,
    ),
    TableDefinition(
        "campaign_team",
        """
        CREATE TABLE IF NOT EXISTS campaign_team (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            campaign_id INT NOT NULL,
            volunteer_id INT NOT NULL,
            role VARCHAR(255) NOT NULL,
            task_note TEXT,
            hours INT DEFAULT 0,
            respect INT DEFAULT 0,
            approval_status VARCHAR(50) DEFAULT 'pending',
            created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY (campaign_id) REFERENCES campaigns(id) ON DELETE CASCADE,
            FOREIGN KEY (volunteer_id) REFERENCES volunteers(id) ON DELETE CASCADE
        )
        """,
    ),
    TableDefinition(
        "activities",
        """
        CREATE TABLE IF NOT EXISTS activities (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            volunteer_id INT NOT NULL,
            activity_type VARCHAR(100) NOT NULL,
            description TEXT NOT NULL,
            campaign_id INT,
            campaign_title VARCHAR(255),
            role VARCHAR(255),
            created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY (volunteer_id) REFERENCES volunteers(id) ON DELETE CASCADE,
            FOREIGN KEY (campaign_id) REFERENCES campaigns(id) ON DELETE SET NULL
        )
        """,
    ),
    TableDefinition(
        "allies",
        """
        CREATE TABLE IF NOT EXISTS allies (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            volunteer_id INT NOT NULL,
            ally_id INT NOT NULL,
            created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY (volunteer_id) REFERENCES volunteers(id) ON DELETE CASCADE,
            FOREIGN KEY (ally_id) REFERENCES volunteers(id) ON DELETE CASCADE,
            CONSTRAINT unique_ally UNIQUE (volunteer_id, ally_id)
        )
        """,
    ),
    TableDefinition(
        "conversations",
        """
        CREATE TABLE IF NOT EXISTS conversations (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            participant1_id INT NOT NULL,
            participant2_id INT NOT NULL,
            last_message_id INT,
            last_message_at DATETIME,
            created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY (participant1_id) REFERENCES volunteers(id) ON DELETE CASCADE,
            FOREIGN KEY (participant2_id) REFERENCES volunteers(id) ON DELETE CASCADE,
            CONSTRAINT unique_conversation UNIQUE (participant1_id, participant2_id)
        )
        """,
    ),
    TableDefinition(
        "messages",
        """
        CREATE TABLE IF NOT EXISTS messages (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            conversation_id INT,
            group_id INT,
            sender_id INT NOT NULL,
            content TEXT,
            message_type VARCHAR(50) DEFAULT 'text',
            file_url TEXT,
            file_name VARCHAR(255),
            file_size INT,
            is_read TINYINT DEFAULT 0,
            status VARCHAR(50) DEFAULT 'sent',
            delivered_at DATETIME,
            read_at DATETIME,
            created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY (conversation_id) REFERENCES conversations(id) ON DELETE CASCADE,
            FOREIGN KEY (sender_id) REFERENCES volunteers(id) ON DELETE CASCADE
        )
        """,
    ),
    TableDefinition(
        "group_chats",
        """
        CREATE TABLE IF NOT EXISTS group_chats (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name VARCHAR(255) NOT NULL,
            description TEXT,
            avatar TEXT,
            creator_id INT NOT NULL,
            allow_member_add TINYINT DEFAULT 0,
            join_approval_required TINYINT DEFAULT 0,
            last_message_id INT,
            last_message_at DATETIME,
            wing_id INT,
            created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY (creator_id) REFERENCES volunteers(id) ON DELETE CASCADE
        )
        """,
    ),
    TableDefinition(
        "group_join_requests",
        """
        CREATE TABLE IF NOT EXISTS group_join_requests (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            group_id INT NOT NULL,
            user_id INT NOT NULL,
            status VARCHAR(50) DEFAULT 'pending',
            requested_at DATETIME DEFAULT CURRENT_TIMESTAMP,
            reviewed_by INT,
            reviewed_at DATETIME,
            FOREIGN KEY (group_id) REFERENCES group_chats(id) ON DELETE CASCADE,
            FOREIGN KEY (user_id) REFERENCES volunteers(id) ON DELETE CASCADE,
            CONSTRAINT unique_request UNIQUE (group_id, user_id)
        )
        """,
    ),
    TableDefinition(
        "group_members",
        """
        CREATE TABLE IF NOT EXISTS group_members (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            group_id INT NOT NULL,
            user_id INT NOT NULL,
            is_admin TINYINT DEFAULT 0,
            joined_at DATETIME DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY (group_id) REFERENCES group_chats(id) ON DELETE CASCADE,
            FOREIGN KEY (user_id) REFERENCES volunteers(id) ON DELETE CASCADE,
            CONSTRAINT unique_member UNIQUE (group_id, user_id)
        )
        """,
    ),
    TableDefinition(
        "pinned_chats",
        """
        CREATE TABLE IF NOT EXISTS pinned_chats (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            user_id INT NOT NULL,
            conversation_id INT,
            group_id INT,
            pinned_at DATETIME DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY (user_id) REFERENCES volunteers(id) ON DELETE CASCADE,
            FOREIGN KEY (conversation_id) REFERENCES conversations(id) ON DELETE CASCADE,
            FOREIGN KEY (group_id) REFERENCES group_chats(id) ON DELETE CASCADE
        )
        """,
    ),
    TableDefinition(
        "muted_chats",
        """
        CREATE TABLE IF NOT EXISTS muted_chats (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            user_id INT NOT NULL,
            conversation_id INT,
            group_id INT,
            muted_at DATETIME DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY (user_id) REFERENCES volunteers(id) ON DELETE CASCADE
        )
        """,
    ),
    TableDefinition(
        "blocked_users",
        """
        CREATE TABLE IF NOT EXISTS blocked_users (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            user_id INT NOT NULL,
            blocked_user_id INT NOT NULL,
            blocked_at DATETIME DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY (user_id) REFERENCES volunteers(id) ON DELETE CASCADE,
            FOREIGN KEY (blocked_user_id) REFERENCES volunteers(id) ON DELETE CASCADE,
            CONSTRAINT unique_block UNIQUE (user_id, blocked_user_id)
        )
        """,
    ),
    TableDefinition(
        "privacy_settings",
        """
        CREATE TABLE IF NOT EXISTS privacy_settings (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            user_id INT NOT NULL UNIQUE,
            allies_visibility VARCHAR(50) DEFAULT 'public',
            created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
            updated_at DATETIME DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY (user_id) REFERENCES volunteers(id) ON DELETE CASCADE
        )
        """,
    ),
    # singleton_key keeps a concurrent first boot from seeding twice.
    TableDefinition(
        SETTINGS_TABLE,
        """
        CREATE TABLE IF NOT EXISTS organization_settings (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            singleton_key TINYINT NOT NULL DEFAULT 1 UNIQUE,
            org_name VARCHAR(255) DEFAULT 'UYHO',
            org_full_name VARCHAR(255) DEFAULT 'United Young Help Organization',
            org_description TEXT,
            org_logo TEXT,
            org_logo_dark TEXT,
            contact_email VARCHAR(255),
            contact_phone VARCHAR(100),
            contact_address TEXT,
            website_url VARCHAR(255),
            facebook_url VARCHAR(255),
            instagram_url VARCHAR(255),
            twitter_url VARCHAR(255),
            linkedin_url VARCHAR(255),
            youtube_url VARCHAR(255),
            tiktok_url VARCHAR(255),
            created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
            updated_at DATETIME DEFAULT CURRENT_TIMESTAMP
        )
        """,
    ),
    TableDefinition(
        "wings",
        """
        CREATE TABLE IF NOT EXISTS wings (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name VARCHAR(255) NOT NULL,
            description TEXT,
            bio TEXT,
            image TEXT,
            cover_image TEXT,
            location VARCHAR(255),
            join_approval_required TINYINT DEFAULT 0,
            projects_count INT DEFAULT 0,
            approval_status VARCHAR(50) DEFAULT 'pending',
            decline_reason TEXT,
            reviewed_by INT,
            reviewed_at DATETIME,
            created_by INT,
            parent_wing_id INT,
            created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
            updated_at DATETIME DEFAULT CURRENT_TIMESTAMP
        )
        """,
    ),
    TableDefinition(
        "wing_members",
        """
        CREATE TABLE IF NOT EXISTS wing_members (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            wing_id INT NOT NULL,
            volunteer_id INT NOT NULL,
            role VARCHAR(100) NOT NULL DEFAULT 'Wing Member',
            sort_order INT DEFAULT 7,
            is_parent TINYINT DEFAULT 0,
            is_admin TINYINT DEFAULT 0,
            joined_at DATETIME DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY (wing_id) REFERENCES wings(id) ON DELETE CASCADE,
            FOREIGN KEY (volunteer_id) REFERENCES volunteers(id) ON DELETE CASCADE,
            CONSTRAINT unique_wing_member UNIQUE (wing_id, volunteer_id)
        )
        """,
    ),
    TableDefinition(
        "wing_posts",
        """
        CREATE TABLE IF NOT EXISTS wing_posts (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            wing_id INT NOT NULL,
            author_id INT NOT NULL,
            content TEXT NOT NULL,
            image TEXT,
            video TEXT,
            likes_count INT DEFAULT 0,
            comments_count INT DEFAULT 0,
            created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
            updated_at DATETIME DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY (wing_id) REFERENCES wings(id) ON DELETE CASCADE,
            FOREIGN KEY (author_id) REFERENCES volunteers(id) ON DELETE CASCADE
        )
        """,
    ),
    TableDefinition(
        "wing_post_likes",
        """
        CREATE TABLE IF NOT EXISTS wing_post_likes (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            post_id INT NOT NULL,
            user_id INT NOT NULL,
            created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY (post_id) REFERENCES wing_posts(id) ON DELETE CASCADE,
            FOREIGN KEY (user_id) REFERENCES volunteers(id) ON DELETE CASCADE,
            CONSTRAINT unique_like UNIQUE (post_id, user_id)
        )
        """,
    ),
    TableDefinition(
        "wing_post_comments",
        """
        CREATE TABLE IF NOT EXISTS wing_post_comments (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            post_id INT NOT NULL,
            user_id INT NOT NULL,
            content TEXT NOT NULL,
            created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY (post_id) REFERENCES wing_posts(id) ON DELETE CASCADE,
            FOREIGN KEY (user_id) REFERENCES volunteers(id) ON DELETE CASCADE
        )
        """,
    ),
    TableDefinition(
        "courses",
        """
        CREATE TABLE IF NOT EXISTS courses (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            title VARCHAR(255) NOT NULL,
            instructor VARCHAR(255) NOT NULL,
            instructor_id INT,
            image TEXT,
            duration VARCHAR(100),
            modules INT DEFAULT 0,
            description TEXT,
            wing VARCHAR(255),
            status VARCHAR(50) DEFAULT 'active',
            created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
            updated_at DATETIME DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY (instructor_id) REFERENCES volunteers(id) ON DELETE SET NULL
        )
        """,
    ),
    TableDefinition(
        "course_modules",
        """
        CREATE TABLE IF NOT EXISTS course_modules (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            course_id INT NOT NULL,
            title VARCHAR(255) NOT NULL,
            order_index INT DEFAULT 0,
            created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY (course_id) REFERENCES courses(id) ON DELETE CASCADE
        )
        """,
    ),
    TableDefinition(
        "course_lessons",
        """
        CREATE TABLE IF NOT EXISTS course_lessons (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            module_id INT NOT NULL,
            title VARCHAR(255) NOT NULL,
            video_url TEXT,
            content TEXT,
            slide_url TEXT,
            duration VARCHAR(50),
            order_index INT DEFAULT 0,
            created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY (module_id) REFERENCES course_modules(id) ON DELETE CASCADE
        )
        """,
    ),
    TableDefinition(
        "course_enrollments",
        """
        CREATE TABLE IF NOT EXISTS course_enrollments (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            course_id INT NOT NULL,
            user_id INT NOT NULL,
            progress INT DEFAULT 0,
            completed_lessons TEXT,
            enrolled_at DATETIME DEFAULT CURRENT_TIMESTAMP,
            completed_at DATETIME,
            FOREIGN KEY (course_id) REFERENCES courses(id) ON DELETE CASCADE,
            FOREIGN KEY (user_id) REFERENCES volunteers(id) ON DELETE CASCADE,
            CONSTRAINT unique_enrollment UNIQUE (course_id, user_id)
        )
        """,
    ),
    TableDefinition(
        "certificates",
        """
        CREATE TABLE IF NOT EXISTS certificates (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            certificate_id VARCHAR(100) UNIQUE NOT NULL,
            user_id INT NOT NULL,
            course_id INT NOT NULL,
            issued_at DATETIME DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY (user_id) REFERENCES volunteers(id) ON DELETE CASCADE,
            FOREIGN KEY (course_id) REFERENCES courses(id) ON DELETE CASCADE
        )
        """,
    ),
    TableDefinition(
        "donations",
        """
        CREATE TABLE IF NOT EXISTS donations (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            donor_id INT,
            donor_name VARCHAR(255),
            donor_email VARCHAR(255),
            donor_phone VARCHAR(100),
            amount REAL NOT NULL,
            payment_method VARCHAR(100),
            transaction_id VARCHAR(255),
            campaign_id INT,
            message TEXT,
            is_anonymous TINYINT DEFAULT 0,
            status VARCHAR(50) DEFAULT 'completed',
            collected_by INT,
            created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY (donor_id) REFERENCES volunteers(id) ON DELETE SET NULL,
            FOREIGN KEY (campaign_id) REFERENCES campaigns(id) ON DELETE SET NULL,
            FOREIGN KEY (collected_by) REFERENCES volunteers(id) ON DELETE SET NULL
        )
        """,
    ),
    TableDefinition(
        "direct_aid",
        """
        CREATE TABLE IF NOT EXISTS direct_aid (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            title VARCHAR(255) NOT NULL,
            description TEXT,
            requester_id INT NOT NULL,
            amount REAL DEFAULT 0,
            status VARCHAR(50) DEFAULT 'pending',
            category VARCHAR(100),
            urgency VARCHAR(50) DEFAULT 'normal',
            created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
            updated_at DATETIME DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY (requester_id) REFERENCES volunteers(id) ON DELETE CASCADE
        )
        """,
    ),
    TableDefinition(
        "announcements",
        """
        CREATE TABLE IF NOT EXISTS announcements (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            title VARCHAR(255) NOT NULL,
            content TEXT NOT NULL,
            author_id INT NOT NULL,
            priority VARCHAR(50) DEFAULT 'normal',
            wing_id INT,
            expires_at DATETIME,
            created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY (author_id) REFERENCES volunteers(id) ON DELETE CASCADE,
            FOREIGN KEY (wing_id) REFERENCES wings(id) ON DELETE SET NULL
        )
        """,
    ),
    TableDefinition(
        "notifications",
        """
        CREATE TABLE IF NOT EXISTS notifications (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            user_id INT NOT NULL,
            type VARCHAR(100) NOT NULL,
            title VARCHAR(255) NOT NULL,
            message TEXT,
            link VARCHAR(255),
            is_read TINYINT DEFAULT 0,
            created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY (user_id) REFERENCES volunteers(id) ON DELETE CASCADE
        )
        """,
    ),
    TableDefinition(
        "push_subscriptions",
        """
        CREATE TABLE IF NOT EXISTS push_subscriptions (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            user_id INT NOT NULL,
            endpoint TEXT NOT NULL,
            p256dh VARCHAR(255),
            auth VARCHAR(255),
            created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY (user_id) REFERENCES volunteers(id) ON DELETE CASCADE
        )
        """,
    ),
    TableDefinition(
        "badges",
        """
        CREATE TABLE IF NOT EXISTS badges (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name VARCHAR(255) NOT NULL,
            description TEXT,
            icon VARCHAR(100),
            color VARCHAR(50),
            requirement_type VARCHAR(100),
            requirement_value INT DEFAULT 0,
            created_at DATETIME DEFAULT CURRENT_TIMESTAMP
        )
        """,
    ),
    TableDefinition(
        "user_badges",
        """
        CREATE TABLE IF NOT EXISTS user_badges (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            user_id INT NOT NULL,
            badge_id INT NOT NULL,
            earned_at DATETIME DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY (user_id) REFERENCES volunteers(id) ON DELETE CASCADE,
            FOREIGN KEY (badge_id) REFERENCES badges(id) ON DELETE CASCADE,
            CONSTRAINT unique_user_badge UNIQUE (user_id, badge_id)
        )
        """,
    ),
    TableDefinition(
        "programs",
        """
        CREATE TABLE IF NOT EXISTS programs (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name VARCHAR(255) NOT NULL,
            description TEXT,
            wing_id INT,
            status VARCHAR(50) DEFAULT 'active',
            start_date DATE,
            end_date DATE,
            created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY (wing_id) REFERENCES wings(id) ON DELETE SET NULL
        )
        """,
    ),
    TableDefinition(
        "ally_requests",
        """
        CREATE TABLE IF NOT EXISTS ally_requests (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            sender_id INT NOT NULL,
            receiver_id INT NOT NULL,
            status VARCHAR(50) DEFAULT 'pending',
            created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY (sender_id) REFERENCES volunteers(id) ON DELETE CASCADE,
            FOREIGN KEY (receiver_id) REFERENCES volunteers(id) ON DELETE CASCADE,
            CONSTRAINT unique_ally_request UNIQUE (sender_id, receiver_id)
        )
        """,
    ),
    TableDefinition(
        "wing_join_requests",
        """
        CREATE TABLE IF NOT EXISTS wing_join_requests (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            wing_id INT NOT NULL,
            user_id INT NOT NULL,
            status VARCHAR(50) DEFAULT 'pending',
            requested_at DATETIME DEFAULT CURRENT_TIMESTAMP,
            reviewed_by INT,
            reviewed_at DATETIME,
            FOREIGN KEY (wing_id) REFERENCES wings(id) ON DELETE CASCADE,
            FOREIGN KEY (user_id) REFERENCES volunteers(id) ON DELETE CASCADE,
            CONSTRAINT unique_wing_request UNIQUE (wing_id, user_id)
        )
        """,
    ),
)
