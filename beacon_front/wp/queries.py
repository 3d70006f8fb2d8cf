"""
Documents GraphQL (WPGraphQL + WPGraphQL Content Blocks + WPGraphQL for ACF).

`editorBlocks(flat: true)` renvoie une liste plate ; l'arbre est reconstruit
côté Python (core.schemas.build_block_tree) via clientId / parentClientId.
"""

# ── Fragments ───────────────────────────────────────────────────────────────

MEDIA_FIELDS = """
  node {
    id
    sourceUrl
    altText
    mediaDetails {
      width
      height
    }
  }
"""

EDITOR_BLOCKS = """
  editorBlocks(flat: true) {
    __typename
    name
    clientId
    parentClientId
    renderedHtml
    ... on CoreParagraph {
      attributes { content align dropCap textColor backgroundColor className style }
    }
    ... on CoreHeading {
      attributes { content level textAlign anchor textColor className style }
    }
    ... on CoreList {
      attributes { ordered values start reversed className style }
    }
    ... on CoreListItem {
      attributes { content className style }
    }
    ... on CoreQuote {
      attributes { value citation align className style }
    }
    ... on CoreImage {
      attributes { url alt caption width height align href linkTarget title className style }
    }
    ... on CoreGallery {
      attributes { columns caption imageCrop linkTo className style }
    }
    ... on CoreEmbed {
      attributes { url caption type providerNameSlug responsive align className style }
    }
    ... on CoreColumns {
      attributes { verticalAlignment isStackedOnMobile className style }
    }
    ... on CoreColumn {
      attributes { width verticalAlignment className style }
    }
    ... on CoreButtons {
      attributes { layout className style }
    }
    ... on CoreButton {
      attributes { text url linkTarget rel backgroundColor textColor gradient width className style }
    }
    ... on CoreSeparator {
      attributes { opacity className style }
    }
    ... on CoreSpacer {
      attributes { height className style }
    }
  }
"""

ACF_PAGE_FIELDS = """
  acfPageFields {
    templateType
    flexibleContent {
      __typename
      ... on FlexibleContentFlexibleContentHeroLayout {
        bandId
        bandClasses
        heading
        subheading
        backgroundImage { node { sourceUrl altText } }
      }
      ... on FlexibleContentFlexibleContentHeadingLayout {
        bandId
        bandClasses
        heading
        subheading
        textAlignment
      }
      ... on FlexibleContentFlexibleContentCtaButtonsLayout {
        bandId
        bandClasses
        buttons { button { url title target } }
      }
      ... on FlexibleContentFlexibleContentImageModuleLayout {
        bandId
        bandClasses
        image { node { sourceUrl altText } }
        caption
        link { url title target }
      }
      ... on FlexibleContentFlexibleContentWysiwygLayout {
        bandId
        bandClasses
        content
      }
      ... on FlexibleContentFlexibleContentAccordionLayout {
        bandId
        bandClasses
        heading
        accordionItems { heading content defaultState }
      }
    }
  }
  acfContactFields {
    address
    phone
    email
    hours
    mapEmbed
  }
"""

COURSE_FIELDS = """
  courseNumber
  courseDescription
  coursePreview
  wooProductId
  courseCredits {
    type
    name
    credits
  }
  courseMaterials {
    title
    file
  }
  masterCourseListFields {
    iarApprovalDate
    notes
  }
"""

# ── Articles ────────────────────────────────────────────────────────────────

GET_POSTS = f"""
query GetPosts($first: Int = 10, $after: String) {{
  posts(first: $first, after: $after) {{
    nodes {{
      __typename
      id
      databaseId
      uri
      slug
      status
      date
      modified
      title
      excerpt
      featuredImage {{ {MEDIA_FIELDS} }}
      categories(first: 5) {{
        nodes {{ id name slug uri }}
      }}
    }}
    pageInfo {{
      hasNextPage
      endCursor
    }}
  }}
}}
"""

GET_POST_BY_SLUG = f"""
query GetPostBySlug($slug: ID!, $asPreview: Boolean = false) {{
  post(id: $slug, idType: SLUG, asPreview: $asPreview) {{
    __typename
    id
    databaseId
    uri
    slug
    status
    date
    modified
    title
    content
    excerpt
    featuredImage {{ {MEDIA_FIELDS} }}
    categories(first: 5) {{
      nodes {{ id name slug uri }}
    }}
    author {{
      node {{
        id
        name
        firstName
        lastName
        avatar {{ url }}
      }}
    }}
    {EDITOR_BLOCKS}
  }}
}}
"""

GET_ALL_POST_SLUGS = """
query GetAllPostSlugs($first: Int = 100) {
  posts(first: $first) {
    nodes {
      slug
      uri
      modified
    }
  }
}
"""

# ── Pages ───────────────────────────────────────────────────────────────────

GET_PAGES = f"""
query GetPages($first: Int = 100) {{
  pages(first: $first, where: {{ status: PUBLISH }}) {{
    nodes {{
      __typename
      id
      databaseId
      uri
      slug
      status
      date
      modified
      title
      featuredImage {{ {MEDIA_FIELDS} }}
      parent {{
        node {{
          ... on Page {{ id title uri }}
        }}
      }}
    }}
  }}
}}
"""

GET_PAGE_BY_URI = f"""
query GetPageByUri($uri: ID!) {{
  page(id: $uri, idType: URI) {{
    __typename
    id
    databaseId
    uri
    slug
    status
    date
    modified
    title
    content
    template {{ templateName }}
    featuredImage {{ {MEDIA_FIELDS} }}
    parent {{
      node {{
        ... on Page {{ id title uri }}
      }}
    }}
    children {{
      nodes {{
        ... on Page {{ id title uri }}
      }}
    }}
    {ACF_PAGE_FIELDS}
    {EDITOR_BLOCKS}
  }}
}}
"""

GET_ALL_PAGE_URIS = """
query GetAllPageUris($first: Int = 100) {
  pages(first: $first, where: { status: PUBLISH }) {
    nodes {
      uri
      slug
      modified
    }
  }
}
"""

# ── Nœud générique (routage dynamique) ──────────────────────────────────────

GET_CONTENT_BY_URI = f"""
query GetContentByUri($uri: String!) {{
  nodeByUri(uri: $uri) {{
    __typename
    id
    uri
    ... on Page {{
      databaseId
      slug
      status
      date
      modified
      title
      content
      template {{ templateName }}
      featuredImage {{ {MEDIA_FIELDS} }}
      parent {{
        node {{
          ... on Page {{ id title uri }}
        }}
      }}
      children {{
        nodes {{
          ... on Page {{ id title uri }}
        }}
      }}
      {ACF_PAGE_FIELDS}
      {EDITOR_BLOCKS}
    }}
    ... on Post {{
      databaseId
      slug
      status
      date
      modified
      title
      content
      excerpt
      featuredImage {{ {MEDIA_FIELDS} }}
      categories(first: 5) {{
        nodes {{ id name slug uri }}
      }}
      author {{
        node {{
          id
          name
          avatar {{ url }}
        }}
      }}
      {EDITOR_BLOCKS}
    }}
    ... on FlmsCourse {{
      databaseId
      slug
      status
      date
      modified
      title
      {COURSE_FIELDS}
    }}
    ... on Category {{
      databaseId
      name
      slug
      description
      count
    }}
    ... on Tag {{
      databaseId
      name
      slug
      description
      count
    }}
  }}
}}
"""

GET_CONTENT_TYPE_BY_URI = """
query GetContentTypeByUri($uri: String!) {
  nodeByUri(uri: $uri) {
    __typename
    id
    uri
    ... on ContentNode {
      contentTypeName
      status
    }
    ... on TermNode {
      taxonomyName
    }
  }
}
"""

# ── Prévisualisation ────────────────────────────────────────────────────────

GET_PREVIEW_CONTENT = f"""
query GetPreviewContent($id: ID!, $asPreview: Boolean = true) {{
  contentNode(id: $id, idType: DATABASE_ID, asPreview: $asPreview) {{
    __typename
    id
    databaseId
    uri
    slug
    status
    date
    modified
    ... on NodeWithTitle {{ title }}
    ... on NodeWithContentEditor {{ content }}
    ... on NodeWithExcerpt {{ excerpt }}
    ... on NodeWithFeaturedImage {{
      featuredImage {{ {MEDIA_FIELDS} }}
    }}
    ... on Post {{
      categories {{
        nodes {{ name uri }}
      }}
      author {{
        node {{
          name
          avatar {{ url }}
        }}
      }}
      {EDITOR_BLOCKS}
    }}
    ... on Page {{
      template {{ templateName }}
      children {{
        nodes {{
          ... on Page {{ id title uri }}
        }}
      }}
      {ACF_PAGE_FIELDS}
      {EDITOR_BLOCKS}
    }}
    ... on FlmsCourse {{
      {COURSE_FIELDS}
    }}
  }}
}}
"""

# ── Formations ──────────────────────────────────────────────────────────────

GET_COURSES = f"""
query GetCourses($first: Int = 50, $after: String) {{
  flmsCourses(first: $first, after: $after) {{
    nodes {{
      __typename
      id
      databaseId
      title
      uri
      slug
      date
      modified
      {COURSE_FIELDS}
    }}
    pageInfo {{
      hasNextPage
      endCursor
    }}
  }}
}}
"""

GET_COURSE_CARDS = """
query GetCourseCards($first: Int = 50, $after: String) {
  flmsCourses(first: $first, after: $after) {
    nodes {
      __typename
      id
      databaseId
      title
      uri
      slug
      courseNumber
      courseDescription
      courseCredits {
        name
        credits
      }
    }
    pageInfo {
      hasNextPage
      endCursor
    }
  }
}
"""

GET_COURSE_BY_SLUG = f"""
query GetCourseBySlug($slug: ID!) {{
  flmsCourse(id: $slug, idType: SLUG) {{
    __typename
    id
    databaseId
    title
    uri
    slug
    date
    modified
    {COURSE_FIELDS}
  }}
}}
"""

GET_ALL_COURSE_SLUGS = """
query GetAllCourseSlugs($first: Int = 200) {
  flmsCourses(first: $first) {
    nodes {
      uri
      slug
      databaseId
      modified
    }
  }
}
"""

GET_FEATURED_COURSES = """
query GetFeaturedCoursesHomepage($first: Int = 6) {
  flmsCourses(first: $first) {
    nodes {
      __typename
      id
      databaseId
      title
      uri
      slug
      courseNumber
      courseDescription
      courseCredits {
        name
        credits
      }
    }
  }
}
"""

# ── Réglages du site / menus ────────────────────────────────────────────────

GET_SITE_SETTINGS = """
query GetSiteSettings {
  generalSettings {
    title
    description
    url
    language
    timezone
    dateFormat
    timeFormat
  }
}
"""

GET_SITE_DATA = """
query GetSiteData {
  generalSettings {
    title
    description
    url
  }
}
"""

GET_MENU = """
query GetMenuByLocation($location: MenuLocationEnum!) {
  menuItems(where: { location: $location }, first: 100) {
    nodes {
      id
      databaseId
      label
      url
      path
      target
      cssClasses
      parentId
      order
    }
  }
}
"""
