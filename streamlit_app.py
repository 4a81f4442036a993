import pandas as pd
import streamlit as st

from devkit import tools
from devkit.config import DEFAULT_DIFF_MODE
from devkit.ddl import get_index_type_label, get_index_type_text
from devkit.json_diff import UNDEFINED, format_value, get_diff_type_color, get_diff_type_name

st.set_page_config(page_title="Devkit", layout="wide")

st.title("Devkit")

# Sidebar: 도구 설명
st.sidebar.title("도구 목록")
st.sidebar.markdown(
    "- **PHP ⇄ JSON**: PHP 배열과 JSON 상호 변환\n"
    "- **DDL 파서**: MySQL CREATE TABLE / CREATE INDEX 구조 분석\n"
    "- **JSON 비교**: 두 JSON의 구조적 차이 확인"
)

tab_php, tab_ddl, tab_diff = st.tabs(["PHP ⇄ JSON", "DDL 파서", "JSON 비교"])

with tab_php:
    if "php_text" not in st.session_state:
        st.session_state.php_text = ""
    if "json_text" not in st.session_state:
        st.session_state.json_text = ""

    col_php, col_json = st.columns(2)
    with col_php:
        st.subheader("PHP Array")
        st.text_area("PHP", key="php_text", height=400, label_visibility="collapsed",
                     placeholder="['name' => 'John', 'roles' => ['admin']]")
    with col_json:
        st.subheader("JSON")
        st.text_area("JSON", key="json_text", height=400, label_visibility="collapsed",
                     placeholder='{"name": "John"}')

    def _php_to_json():
        result = tools.php_to_json(st.session_state.php_text)
        if "error" in result:
            st.session_state.php_error = result["error"]
        else:
            st.session_state.json_text = result["content"]
            st.session_state.php_error = None

    def _json_to_php():
        result = tools.json_to_php(st.session_state.json_text)
        if "error" in result:
            st.session_state.php_error = result["error"]
        else:
            st.session_state.php_text = result["content"]
            st.session_state.php_error = None

    button_left, button_right = st.columns(2)
    button_left.button("PHP → JSON", on_click=_php_to_json, use_container_width=True)
    button_right.button("JSON → PHP", on_click=_json_to_php, use_container_width=True)

    if st.session_state.get("php_error"):
        st.error(st.session_state.php_error)

with tab_ddl:
    ddl_text = st.text_area(
        "DDL 문을 입력하세요",
        height=300,
        placeholder="CREATE TABLE users (\n  id INT PRIMARY KEY,\n  name VARCHAR(100)\n);",
    )

    if st.button("파싱"):
        result = tools.parse_ddl_text(ddl_text)
        if "error" in result:
            st.error(result["error"])
        else:
            parsed = result["result"]
            st.success(f"파싱 완료: 테이블 {len(parsed['tables'])}개")

            for table in parsed["tables"]:
                title = table["table_name"]
                if table["table_comment"]:
                    title += f" ({table['table_comment']})"
                st.subheader(title)

                rows = []
                for table_field in table["fields"]:
                    labels = [get_index_type_label("PRIMARY")] if table_field["is_primary_key"] else []
                    labels += [
                        f"{get_index_type_label(idx['type'])}({idx['name']})"
                        for idx in table_field["indexes"]
                        if not (idx["type"] == "PRIMARY" and table_field["is_primary_key"])
                    ]
                    rows.append({
                        "필드명": table_field["name"] + (" (AI)" if table_field["auto_increment"] else ""),
                        "타입": table_field["type"],
                        "NULL 허용": "예" if table_field["nullable"] else "아니오",
                        "기본값": table_field["default_value"] if table_field["default_value"] is not None else "-",
                        "인덱스": ", ".join(labels) or "-",
                        "설명": table_field["comment"] or "-",
                    })
                st.dataframe(pd.DataFrame(rows), use_container_width=True, hide_index=True)

                if table["indexes"]:
                    index_df = pd.DataFrame([
                        {
                            "인덱스명": index["name"],
                            "타입": get_index_type_text(index["type"]),
                            "컬럼": ", ".join(index["columns"]),
                        }
                        for index in table["indexes"]
                    ])
                    st.dataframe(index_df, use_container_width=True, hide_index=True)

                for index in table["indexes"]:
                    if index["missing_columns"]:
                        st.warning(
                            f"인덱스 {index['name']}: 테이블에 없는 컬럼 {', '.join(index['missing_columns'])}"
                        )

            if parsed["standalone_indexes"]:
                st.subheader("독립 인덱스")
                st.dataframe(pd.DataFrame([
                    {
                        "테이블": item["table_name"],
                        "인덱스명": item["index"]["name"],
                        "타입": get_index_type_text(item["index"]["type"]),
                        "컬럼": ", ".join(item["index"]["columns"]),
                    }
                    for item in parsed["standalone_indexes"]
                ]), use_container_width=True, hide_index=True)

            with st.expander("Markdown"):
                st.code(result["markdown"], language="markdown")

with tab_diff:
    mode = st.radio(
        "비교 모드",
        ["loose", "strict"],
        index=["loose", "strict"].index(DEFAULT_DIFF_MODE),
        format_func=lambda m: "느슨하게 (순서 무시)" if m == "loose" else "엄격하게 (key 순서 포함)",
        horizontal=True,
    )
    col_old, col_new = st.columns(2)
    old_json = col_old.text_area("기존 JSON", height=300)
    new_json = col_new.text_area("새 JSON", height=300)

    if st.button("비교"):
        result = tools.diff_json_text(old_json, new_json, mode)
        if "error" in result:
            st.error(result["error"])
        elif result["is_equal"]:
            st.success(result["summary"])
        else:
            st.info(result["summary"])
            for item in result["diffs"]:
                color = get_diff_type_color(item["type"])
                name = get_diff_type_name(item["type"])
                st.markdown(
                    f"<span style='color:{color}'>**[{name}]**</span> `{item['path']}`",
                    unsafe_allow_html=True,
                )
                if item["type"] == "order_changed":
                    st.caption(f"위치 {item['old_index']} → {item['new_index']}")
                else:
                    before = format_value(item.get("old_value", UNDEFINED))
                    after = format_value(item.get("new_value", UNDEFINED))
                    st.code(f"- {before}\n+ {after}", language="diff")

            with st.expander("결과 JSON"):
                st.code(tools.to_pretty_json(result["diffs"]), language="json")
